"""
Client for the UCloud JSON management API.

Management calls are plain GETs whose query string carries the public key
and a SHA1 signature over the sorted parameters.
"""

import json
import logging
from dataclasses import dataclass
from typing import Dict
from urllib.parse import urlencode

import requests

from .auth import Credentials, api_signature
from .constants import DEFAULT_API_CONFIG
from .exceptions import ConfigurationError, ParseError, TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BasicResponse:
    ret_code: int
    action: str = ''
    message: str = ''


class ApiClient:
    """Signed GET client for the UCloud management API."""

    def __init__(self, base_url: str, public_key: str, private_key: str, **config):
        if not base_url:
            raise ConfigurationError("base_url cannot be empty")
        if not public_key or not private_key:
            raise ConfigurationError("public_key and private_key cannot be empty")

        self.base_url = base_url.rstrip('/')
        self.credentials = Credentials(public_key, private_key)
        self.config = {**DEFAULT_API_CONFIG, **config}
        self.session = requests.Session()

    def signed_params(self, params: Dict[str, str]) -> Dict[str, str]:
        """Copy params, add PublicKey and the matching Signature."""
        signed = dict(params)
        signed['PublicKey'] = self.credentials.public_key
        signed['Signature'] = api_signature(signed, self.credentials.private_key)
        return signed

    def raw_get(self, path: str, params: Dict[str, str]) -> requests.Response:
        """
        Issue a signed GET.

        Raises:
            TransportError: If the request fails
        """
        signed = self.signed_params(params)
        query = urlencode(sorted(signed.items()))
        url = f"{self.base_url}{path}?{query}"

        logger.debug("GET %s%s (Action=%s)", self.base_url, path, params.get('Action'))
        try:
            return self.session.get(url, timeout=self.config['timeout'])
        except requests.RequestException as e:
            raise TransportError(f"HTTP request failed: {e}") from e

    def call(self, params: Dict[str, str]) -> BasicResponse:
        """
        Call an API action and decode the common response fields.

        Raises:
            TransportError: If the request fails
            ParseError: If the response is not a JSON object
        """
        response = self.raw_get('/', params)
        try:
            data = json.loads(response.content)
        except ValueError as e:
            raise ParseError(f"Invalid JSON response: {e}") from e
        if not isinstance(data, dict):
            raise ParseError(f"Expected JSON object, got {type(data).__name__}")

        return BasicResponse(
            ret_code=data.get('RetCode', 0),
            action=data.get('Action', ''),
            message=data.get('Message', '')
        )

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
