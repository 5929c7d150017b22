"""
Request signing for the UFile object API.

The string to sign is the HTTP verb, Content-MD5, Content-Type and Date,
each terminated by a newline, followed by the canonicalized UCloud headers
and the canonicalized resource with nothing in between. A non-empty
canonicalized header block carries its own trailing newline.
"""

import base64
import hashlib
import hmac
from dataclasses import dataclass, field

from .constants import AUTH_SCHEME


@dataclass(frozen=True)
class Credentials:
    """UCloud key pair. The private key never shows up in repr or logs."""
    public_key: str
    private_key: str = field(repr=False)


@dataclass(frozen=True)
class SignParam:
    """Signable fields of a single request."""
    verb: str
    canonicalized_resource: str
    content_md5: str = ''
    content_type: str = ''
    date: str = ''
    canonicalized_headers: str = ''

    @classmethod
    def for_object(cls, verb: str, bucket: str, key: str, content_type: str = '') -> 'SignParam':
        """Build the parameters for an object request. Names are not escaped."""
        return cls(
            verb=verb,
            canonicalized_resource=canonical_resource(bucket, key),
            content_type=content_type,
        )

    def string_to_sign(self) -> str:
        return (
            self.verb + '\n' +
            self.content_md5 + '\n' +
            self.content_type + '\n' +
            self.date + '\n' +
            self.canonicalized_headers +
            self.canonicalized_resource
        )


def canonical_resource(bucket: str, key: str) -> str:
    return '/' + bucket + '/' + key


def signature(private_key: str, string_to_sign: str) -> str:
    """
    Generate the UFile request signature.

    Args:
        private_key: UCloud private key
        string_to_sign: Canonical request string

    Returns:
        Base64-encoded HMAC-SHA1 digest
    """
    mac = hmac.new(
        private_key.encode('utf-8'),
        string_to_sign.encode('utf-8'),
        hashlib.sha1
    )
    return base64.b64encode(mac.digest()).decode('ascii')


def sign(param: SignParam, credentials: Credentials) -> str:
    """
    Produce the Authorization header value for a request.

    Args:
        param: Signable request fields
        credentials: Key pair used for signing

    Returns:
        Token of the form "UCloud <public-key>:<signature>"
    """
    sig = signature(credentials.private_key, param.string_to_sign())
    return f"{AUTH_SCHEME} {credentials.public_key}:{sig}"


def api_signature(params: dict, private_key: str) -> str:
    """
    Sign management API query parameters.

    Parameter names are sorted, each name is concatenated with its value,
    the private key is appended and the whole string is SHA1-hashed.

    Returns:
        Lowercase hex digest
    """
    payload = ''.join(k + str(params[k]) for k in sorted(params))
    payload += private_key
    return hashlib.sha1(payload.encode('utf-8')).hexdigest()
