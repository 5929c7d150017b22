"""
UFile Client Library

A Python client library for the UCloud UFile object storage API. It signs
HEAD/GET/PUT requests and normalizes UFile responses into immutable values.

Example usage:
    from ufile_client import UFileClient

    client = UFileClient("public-key", "private-key")
    client.put("my-bucket", "hello.txt", "text/plain", b"hello")
    data = client.get("my-bucket", "hello.txt")
"""

import logging

from .api import ApiClient, BasicResponse
from .auth import Credentials, SignParam, sign, signature, api_signature
from .client import UFileClient
from .exceptions import (
    UFileClientError,
    ConfigurationError,
    ArgumentError,
    TransportError,
    ParseError,
    NotFoundError,
    RemoteError
)
from .hosts import DomainHosts, ProxyHosts, Target
from .response import ErrorEnvelope, NormalizedResponse, parse_response
from .constants import (
    AUTH_SCHEME,
    DEFAULT_CONFIG,
    UPLOAD_SUFFIX,
    DOWNLOAD_SUFFIX
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__all__ = [
    "UFileClient",
    "ApiClient",
    "BasicResponse",
    "Credentials",
    "SignParam",
    "sign",
    "signature",
    "api_signature",
    "DomainHosts",
    "ProxyHosts",
    "Target",
    "ErrorEnvelope",
    "NormalizedResponse",
    "parse_response",
    "UFileClientError",
    "ConfigurationError",
    "ArgumentError",
    "TransportError",
    "ParseError",
    "NotFoundError",
    "RemoteError",
    "AUTH_SCHEME",
    "DEFAULT_CONFIG",
    "UPLOAD_SUFFIX",
    "DOWNLOAD_SUFFIX"
]
