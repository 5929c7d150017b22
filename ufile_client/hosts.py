"""
Host resolution strategies.

A strategy maps (verb, bucket, key) to the URL the request is sent to and,
when routing goes through a proxy, the Host header the request must carry.
"""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

from .constants import (
    DOWNLOAD_SUFFIX,
    UPLOAD_SUFFIX,
    VERB_PUT,
    WWW_PREFIX
)
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class Target:
    url: str
    host: Optional[str] = None


class DomainHosts:
    """Fixed per-verb domains: uploads and reads go to different endpoints."""

    def __init__(self, upload_suffix: str = UPLOAD_SUFFIX, download_suffix: str = DOWNLOAD_SUFFIX):
        self.upload_suffix = upload_suffix
        self.download_suffix = download_suffix

    def resolve(self, verb: str, bucket: str, key: str) -> Target:
        suffix = self.upload_suffix if verb == VERB_PUT else self.download_suffix
        return Target(url=f"http://{bucket}{suffix}/{key}")


class ProxyHosts:
    """
    Route every verb through a proxy URL.

    The bucket host is derived from the proxy hostname, so signing and the
    Host header stay bound to the bucket whatever the physical route is.
    """

    def __init__(self, proxy_url: str):
        self.proxy_url = proxy_url.rstrip('/')
        self.base_host = bucket_base_host(proxy_url)

    def resolve(self, verb: str, bucket: str, key: str) -> Target:
        return Target(
            url=f"{self.proxy_url}/{key}",
            host=f"{bucket}.{self.base_host}"
        )


def bucket_base_host(proxy_url: str) -> str:
    """Hostname of the proxy URL without a leading "www."."""
    try:
        hostname = urlparse(proxy_url).hostname
    except ValueError as e:
        raise ConfigurationError(f"Invalid proxy URL {proxy_url!r}: {e}") from e
    if not hostname:
        raise ConfigurationError(f"Proxy URL {proxy_url!r} has no hostname")
    if hostname.startswith(WWW_PREFIX):
        hostname = hostname[len(WWW_PREFIX):]
    return hostname
