"""
UFile object storage client.

This module signs HEAD/GET/PUT requests against the UCloud UFile API,
dispatches them over a shared requests session and maps the normalized
responses onto return values or exceptions.
"""

import logging
from time import sleep
from typing import Optional, Tuple, Union

import requests

from .auth import Credentials, SignParam, sign
from .constants import (
    DEFAULT_CONFIG,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_HOST,
    VERB_GET,
    VERB_HEAD,
    VERB_PUT
)
from .exceptions import (
    ArgumentError,
    ConfigurationError,
    NotFoundError,
    ParseError,
    RemoteError,
    TransportError
)
from .hosts import DomainHosts, ProxyHosts
from .response import NormalizedResponse, parse_response

logger = logging.getLogger(__name__)


class UFileClient:
    """
    Client for the UFile object API.

    Without a proxy URL, uploads go to the upload domain and reads go to the
    download domain of each bucket. With a proxy URL, all requests are sent
    to the proxy and the Host header names the bucket host derived from it.
    """

    def __init__(self, public_key: str, private_key: str, proxy_url: Optional[str] = None, **config):
        """
        Initialize UFile client.

        Args:
            public_key: UCloud public key
            private_key: UCloud private key
            proxy_url: Optional proxy/base URL all requests are routed through
            **config: Configuration options (timeout, max_retries, retry_interval,
                upload_suffix, download_suffix)
        """
        self.credentials = Credentials(public_key, private_key)

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

        if proxy_url:
            self.hosts = ProxyHosts(proxy_url)
        else:
            self.hosts = DomainHosts(self.config['upload_suffix'], self.config['download_suffix'])

        self.session = requests.Session()

    def _validate_config(self):
        """Validate client configuration."""
        if not self.credentials.public_key:
            raise ConfigurationError("public_key cannot be empty")

        if not self.credentials.private_key:
            raise ConfigurationError("private_key cannot be empty")

        if self.config['timeout'] <= 0:
            raise ConfigurationError("timeout must be positive")

        if not isinstance(self.config['max_retries'], int) or self.config['max_retries'] < 0:
            raise ConfigurationError("max_retries must be a non-negative integer")

        if self.config['retry_interval'] < 0:
            raise ConfigurationError("retry_interval cannot be negative")

    @staticmethod
    def _check_object_name(bucket: str, key: str):
        if not bucket:
            raise ArgumentError("bucket cannot be empty")
        if not key:
            raise ArgumentError("key cannot be empty")

    def _make_request(self, verb: str, bucket: str, key: str,
                      content_type: str = '', data: Optional[bytes] = None) -> NormalizedResponse:
        """
        Sign and send a single request.

        Args:
            verb: HEAD, GET or PUT
            bucket: Bucket name
            key: Object key
            content_type: Content type of the body (PUT only)
            data: Request body (PUT only)

        Returns:
            NormalizedResponse for the attempt

        Raises:
            TransportError: If the request fails before a response arrives
            ParseError: If a JSON error body is malformed
        """
        target = self.hosts.resolve(verb, bucket, key)
        param = SignParam.for_object(verb, bucket, key, content_type)

        headers = {HEADER_AUTHORIZATION: sign(param, self.credentials)}
        if target.host:
            headers[HEADER_HOST] = target.host
        if verb == VERB_PUT:
            headers[HEADER_CONTENT_TYPE] = content_type

        kwargs = {'headers': headers, 'timeout': self.config['timeout']}
        if data is not None:
            kwargs['data'] = data

        logger.debug("%s %s (bucket=%s, key=%s)", verb, target.url, bucket, key)
        try:
            http_response = self.session.request(verb, target.url, **kwargs)
        except requests.RequestException as e:
            raise TransportError(f"HTTP request failed: {e}") from e

        logger.debug("%s %s -> %s", verb, target.url, http_response.status_code)
        return parse_response(http_response, verb)

    def head_with_etag(self, bucket: str, key: str) -> Tuple[bool, int, Optional[str]]:
        """
        Check whether an object exists.

        Returns:
            Tuple of (exists, size, etag); (False, 0, None) when not found

        Raises:
            RemoteError: On any status other than 200 or 404
        """
        self._check_object_name(bucket, key)
        resp = self._make_request(VERB_HEAD, bucket, key)
        if resp.status_code == requests.codes.ok:
            return True, resp.content_length, resp.etag
        if resp.status_code == requests.codes.not_found:
            return False, 0, None
        raise RemoteError(resp)

    def head(self, bucket: str, key: str) -> Tuple[bool, int]:
        """Return (exists, size) for an object."""
        exists, size, _ = self.head_with_etag(bucket, key)
        return exists, size

    def get_response(self, bucket: str, key: str) -> NormalizedResponse:
        """
        Download an object with its metadata.

        Raises:
            NotFoundError: If the object does not exist
            RemoteError: On any other non-200 status
        """
        self._check_object_name(bucket, key)
        resp = self._make_request(VERB_GET, bucket, key)
        if resp.status_code == requests.codes.ok:
            return resp
        if resp.status_code == requests.codes.not_found:
            raise NotFoundError(bucket, key, resp)
        raise RemoteError(resp)

    def get(self, bucket: str, key: str) -> bytes:
        """Download an object's bytes."""
        return self.get_response(bucket, key).content

    def put(self, bucket: str, key: str, content_type: str, data: Union[bytes, str],
            max_retries: Optional[int] = None) -> NormalizedResponse:
        """
        Upload an object, retrying failed attempts after a fixed interval.

        Args:
            bucket: Bucket name
            key: Object key
            content_type: Content type stored with the object
            data: Object body; str is encoded as UTF-8
            max_retries: Retries after the first attempt (defaults to config)

        Returns:
            NormalizedResponse of the successful attempt

        Raises:
            ArgumentError: If arguments are malformed (no request is sent)
            RemoteError: If the last attempt got a non-200 status
            TransportError: If the last attempt failed in transport
            ParseError: If the last attempt got a malformed JSON error body
        """
        self._check_object_name(bucket, key)
        if content_type is None:
            raise ArgumentError("content_type is required for PUT")
        if data is None:
            raise ArgumentError("data is required for PUT")
        if isinstance(data, str):
            data = data.encode('utf-8')
        elif not isinstance(data, (bytes, bytearray)):
            raise ArgumentError(f"data must be bytes or str, not {type(data).__name__}")

        if max_retries is None:
            max_retries = self.config['max_retries']
        if not isinstance(max_retries, int) or isinstance(max_retries, bool) or max_retries < 0:
            raise ArgumentError("max_retries must be a non-negative integer")

        attempts = 0
        while True:
            attempts += 1
            try:
                resp = self._make_request(VERB_PUT, bucket, key, content_type, bytes(data))
                if resp.status_code == requests.codes.ok:
                    return resp
                error = RemoteError(resp)
            except (TransportError, ParseError) as e:
                error = e

            if attempts > max_retries:
                raise error

            logger.warning("PUT /%s/%s failed (attempt %d of %d): %s; retrying in %ss",
                           bucket, key, attempts, max_retries + 1, error,
                           self.config['retry_interval'])
            sleep(self.config['retry_interval'])

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
