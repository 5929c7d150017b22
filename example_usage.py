#!/usr/bin/env python3
"""
Basic usage examples for UFile Python client library.

This script uploads an object, checks it with HEAD, downloads it again and
shows how a missing object is reported. Credentials are read from the
UFILE_PUBLIC_KEY, UFILE_PRIVATE_KEY, UFILE_BUCKET and (optionally)
UFILE_PROXY_URL environment variables.
"""

import logging
import os
import sys
import uuid

from ufile_client import UFileClient, UFileClientError, NotFoundError


def main():
    """Run basic usage examples."""
    public_key = os.environ.get("UFILE_PUBLIC_KEY")
    private_key = os.environ.get("UFILE_PRIVATE_KEY")
    bucket = os.environ.get("UFILE_BUCKET")
    proxy_url = os.environ.get("UFILE_PROXY_URL") or None

    if not (public_key and private_key and bucket):
        print("Set UFILE_PUBLIC_KEY, UFILE_PRIVATE_KEY and UFILE_BUCKET first.")
        return 1

    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.INFO)

    print("=== UFile Python Client Basic Usage Examples ===\n")

    print("1. Creating UFile client...")
    client = UFileClient(public_key, private_key, proxy_url=proxy_url, max_retries=2)
    print(f"   Routing: {proxy_url or 'per-verb UFile domains'}")
    print(f"   Public key: {public_key[:8]}...\n")

    key = f"examples/{uuid.uuid4()}.txt"
    payload = b"Hello, UFile world!"

    try:
        print(f"2. Uploading /{bucket}/{key}...")
        resp = client.put(bucket, key, "text/plain", payload)
        print(f"   Stored, ETag: {resp.etag}\n")

        print("3. Checking the object with HEAD...")
        exists, size, etag = client.head_with_etag(bucket, key)
        print(f"   Exists: {exists}, size: {size}, ETag: {etag}\n")

        print("4. Downloading the object...")
        data = client.get(bucket, key)
        print(f"   Content: {data!r}")
        print(f"   Matches upload: {'yes' if data == payload else 'NO'}\n")

        print("5. Requesting a missing object...")
        try:
            client.get(bucket, key + ".missing")
        except NotFoundError as e:
            print(f"   Not found, as expected: {e}\n")

    except UFileClientError as e:
        print(f"   UFile error: {e}")
        return 1
    finally:
        client.close()

    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
