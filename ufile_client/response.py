"""
Normalization of UFile HTTP responses.

Successful GETs carry the object bytes, HEAD and PUT carry only headers,
and failures carry either a JSON error envelope or an opaque body.
"""

import json
from dataclasses import dataclass
from typing import Optional

import requests

from .constants import (
    CONTENT_TYPE_JSON,
    HEADER_CONTENT_LENGTH,
    HEADER_CONTENT_TYPE,
    HEADER_ETAG,
    HEADER_SESSION_ID,
    VERB_GET,
    VERB_HEAD
)
from .exceptions import ParseError


@dataclass(frozen=True)
class ErrorEnvelope:
    ret_code: int
    err_msg: str


@dataclass(frozen=True)
class NormalizedResponse:
    """Uniform view of a UFile response."""
    status_code: int
    content_length: int
    content_type: str
    etag: Optional[str] = None
    session_id: Optional[str] = None
    content: Optional[bytes] = None
    error: Optional[ErrorEnvelope] = None

    @property
    def ok(self) -> bool:
        return self.status_code == requests.codes.ok


def _content_length(headers) -> int:
    value = headers.get(HEADER_CONTENT_LENGTH)
    if value is None:
        return -1
    try:
        return int(value)
    except ValueError:
        return -1


def _is_json(content_type: str) -> bool:
    return content_type.split(';', 1)[0].strip().lower() == CONTENT_TYPE_JSON


def parse_error_envelope(body: bytes) -> ErrorEnvelope:
    """
    Decode a {"RetCode": int, "ErrMsg": str} body.

    Raises:
        ParseError: If the body is not a JSON object
    """
    try:
        data = json.loads(body)
    except ValueError as e:
        raise ParseError(f"Invalid JSON error body: {e}") from e
    if not isinstance(data, dict):
        raise ParseError(f"Expected JSON object, got {type(data).__name__}")
    return ErrorEnvelope(
        ret_code=data.get('RetCode', 0),
        err_msg=data.get('ErrMsg', '')
    )


def parse_response(http_response: requests.Response, verb: str) -> NormalizedResponse:
    """
    Turn a transport response into a NormalizedResponse.

    Args:
        http_response: Response returned by requests
        verb: HTTP verb of the originating request

    Returns:
        NormalizedResponse with content or error populated as appropriate

    Raises:
        ParseError: If a JSON error body is malformed
    """
    headers = http_response.headers
    status_code = http_response.status_code
    fields = {
        'status_code': status_code,
        'content_length': _content_length(headers),
        'content_type': headers.get(HEADER_CONTENT_TYPE, ''),
        'etag': headers.get(HEADER_ETAG),
        'session_id': headers.get(HEADER_SESSION_ID),
    }

    if status_code == requests.codes.ok:
        if verb == VERB_GET:
            return NormalizedResponse(content=http_response.content, **fields)
        return NormalizedResponse(**fields)

    if status_code == requests.codes.not_found and verb == VERB_HEAD:
        return NormalizedResponse(**fields)

    body = http_response.content
    if _is_json(fields['content_type']) and fields['content_length'] > 0:
        return NormalizedResponse(error=parse_error_envelope(body), **fields)
    return NormalizedResponse(content=body, **fields)
