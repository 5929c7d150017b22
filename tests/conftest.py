"""
Shared fixtures for UFile client tests.
"""

import pytest
import requests
from requests.structures import CaseInsensitiveDict


def _make_response(status_code, body=b"", headers=None):
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response.headers = CaseInsensitiveDict(headers or {})
    return response


@pytest.fixture
def make_response():
    """Factory for requests.Response objects that never touch the network."""
    return _make_response
