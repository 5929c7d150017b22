"""
Unit tests for UFile request signing.
"""

import base64
import dataclasses
import hashlib
import hmac

import pytest

from ufile_client import Credentials, SignParam, sign, signature, api_signature


class TestSignParam:
    """Test string-to-sign construction."""

    def test_string_to_sign_field_order(self):
        """Test fields are joined in fixed order."""
        param = SignParam(
            verb="PUT",
            content_md5="md5",
            content_type="image/jpeg",
            date="Mon, 19 Oct 2026 10:00:00 GMT",
            canonicalized_headers="x-ucloud-a:1\n",
            canonicalized_resource="/bucket/key.jpg"
        )

        assert param.string_to_sign() == (
            "PUT\nmd5\nimage/jpeg\nMon, 19 Oct 2026 10:00:00 GMT\n"
            "x-ucloud-a:1\n/bucket/key.jpg"
        )

    def test_empty_fields_keep_their_slots(self):
        """Test empty fields still occupy their newline."""
        param = SignParam(verb="GET", canonicalized_resource="/bucket/key")

        assert param.string_to_sign() == "GET\n\n\n\n/bucket/key"

    def test_for_object(self):
        """Test canonical resource is /bucket/key without escaping."""
        param = SignParam.for_object("PUT", "my-bucket", "dir/a b.txt", "text/plain")

        assert param.canonicalized_resource == "/my-bucket/dir/a b.txt"
        assert param.content_type == "text/plain"
        assert param.verb == "PUT"

    def test_immutable(self):
        """Test sign params cannot be changed after construction."""
        param = SignParam.for_object("GET", "b", "k")

        with pytest.raises(dataclasses.FrozenInstanceError):
            param.verb = "PUT"


class TestSign:
    """Test signature and token generation."""

    @pytest.fixture
    def credentials(self):
        return Credentials("public-key", "private-key")

    def test_signature(self):
        """Test signature is base64 HMAC-SHA1."""
        expected = base64.b64encode(
            hmac.new(b"secret", b"GET\n\n\n\n/b/k", hashlib.sha1).digest()
        ).decode()

        assert signature("secret", "GET\n\n\n\n/b/k") == expected

    def test_token_format(self, credentials):
        """Test token is "UCloud <public-key>:<signature>"."""
        param = SignParam.for_object("HEAD", "bucket", "key")
        token = sign(param, credentials)

        expected_sig = signature("private-key", "HEAD\n\n\n\n/bucket/key")
        assert token == f"UCloud public-key:{expected_sig}"

    def test_deterministic(self, credentials):
        """Test identical inputs produce identical tokens."""
        param = SignParam.for_object("PUT", "bucket", "key", "image/png")

        assert sign(param, credentials) == sign(param, credentials)
        assert sign(param, credentials) == sign(
            SignParam.for_object("PUT", "bucket", "key", "image/png"), credentials
        )

    def test_date_changes_signature(self, credentials):
        """Test changing only the date changes the signature."""
        a = SignParam(verb="GET", canonicalized_resource="/b/k", date="d1")
        b = SignParam(verb="GET", canonicalized_resource="/b/k", date="d2")

        assert sign(a, credentials) != sign(b, credentials)

    def test_canonicalized_headers_change_signature(self, credentials):
        """Test changing only canonicalized headers changes the signature."""
        a = SignParam(verb="GET", canonicalized_resource="/b/k")
        b = SignParam(verb="GET", canonicalized_resource="/b/k",
                      canonicalized_headers="x-ucloud-meta:1\n")

        assert sign(a, credentials) != sign(b, credentials)

    def test_resource_binds_signature(self, credentials):
        """Test signature differs per bucket and per key."""
        base = sign(SignParam.for_object("GET", "b", "k"), credentials)

        assert sign(SignParam.for_object("GET", "b2", "k"), credentials) != base
        assert sign(SignParam.for_object("GET", "b", "k2"), credentials) != base

    def test_private_key_not_in_repr(self, credentials):
        """Test private key is hidden from repr."""
        assert "private-key" not in repr(credentials)
        assert "public-key" in repr(credentials)


class TestApiSignature:
    """Test management API parameter signing."""

    def test_sorted_concatenation(self):
        """Test params are sorted, concatenated and hashed with the key."""
        params = {"Zone": "cn-bj2", "Action": "DescribeBucket", "PublicKey": "pub"}
        expected = hashlib.sha1(
            b"ActionDescribeBucketPublicKeypubZonecn-bj2secret"
        ).hexdigest()

        assert api_signature(params, "secret") == expected

    def test_order_independent(self):
        """Test insertion order does not matter."""
        a = {"A": "1", "B": "2"}
        b = {"B": "2", "A": "1"}

        assert api_signature(a, "k") == api_signature(b, "k")
