"""
Custom exceptions for UFile client library.
"""


class UFileClientError(Exception):
    """Base exception for UFile client errors."""
    pass


class ConfigurationError(UFileClientError):
    """Raised when client configuration is invalid."""
    pass


class ArgumentError(UFileClientError):
    """Raised when an operation is invoked with malformed arguments."""
    pass


class TransportError(UFileClientError):
    """Raised when the HTTP request itself fails."""
    pass


class ParseError(UFileClientError):
    """Raised when a body that claims to be JSON cannot be decoded."""
    pass


class NotFoundError(UFileClientError):
    """Raised when a GET targets an object that does not exist."""

    def __init__(self, bucket: str, key: str, response=None):
        self.bucket = bucket
        self.key = key
        self.response = response
        super().__init__(f"Object not found: /{bucket}/{key}")


class RemoteError(UFileClientError):
    """Raised when UFile answers with an unexpected status."""

    def __init__(self, response):
        self.response = response
        self.status_code = response.status_code
        self.session_id = response.session_id
        self.content = response.content
        if response.error is not None:
            self.ret_code = response.error.ret_code
            self.message = response.error.err_msg
        else:
            self.ret_code = None
            self.message = (response.content or b"").decode('utf-8', errors='replace')
        super().__init__(
            f"UFile error (status {self.status_code}, ret_code {self.ret_code}, "
            f"session {self.session_id}): {self.message}"
        )
