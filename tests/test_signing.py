"""
Tests for request payload signing
"""
import base64
import hashlib
import hmac

from accessgrid.signing import EMPTY_PAYLOAD, serialize_body, sign_payload, verify_signature


def _reference_signature(secret: str, payload: bytes) -> str:
    encoded = base64.b64encode(payload)
    return hmac.new(secret.encode("utf-8"), encoded, hashlib.sha256).hexdigest()


class TestSignPayload:
    """Tests for sign_payload."""

    def test_matches_base64_then_hmac(self):
        """Should HMAC the base64 encoding of the body, not the raw body."""
        body = b'{"card_template_id":"0xd3adb00b5"}'

        signature = sign_payload("test-secret", body)

        assert signature == _reference_signature("test-secret", body)
        assert signature != hmac.new(b"test-secret", body, hashlib.sha256).hexdigest()

    def test_is_lowercase_hex(self):
        """Should return a 64 character lowercase hex digest."""
        signature = sign_payload("test-secret", b"{}")

        assert len(signature) == 64
        assert signature == signature.lower()
        int(signature, 16)

    def test_deterministic(self):
        """Should produce the same signature for the same inputs."""
        body = serialize_body({"full_name": "Employee name"})

        assert sign_payload("k", body) == sign_payload("k", body)

    def test_different_secret_changes_signature(self):
        """Should depend on the secret key."""
        body = serialize_body({"full_name": "Employee name"})

        assert sign_payload("secret-a", body) != sign_payload("secret-b", body)

    def test_none_body_signed_as_empty_object(self):
        """Should sign a missing body exactly like an empty JSON object."""
        assert sign_payload("test-secret", None) == sign_payload("test-secret", b"{}")
        assert sign_payload("test-secret", None) == _reference_signature("test-secret", EMPTY_PAYLOAD)

    def test_empty_object_body_matches_none(self):
        """Should give the serialized empty dict the same signature as no body."""
        assert sign_payload("test-secret", serialize_body({})) == sign_payload("test-secret", None)


class TestSerializeBody:
    """Tests for serialize_body."""

    def test_none_means_no_body(self):
        assert serialize_body(None) is None

    def test_compact_json(self):
        assert serialize_body({"a": 1, "b": "x"}) == b'{"a":1,"b":"x"}'

    def test_keeps_unicode(self):
        assert serialize_body({"full_name": "José"}) == '{"full_name":"José"}'.encode("utf-8")


class TestVerifySignature:
    """Tests for verify_signature."""

    def test_accepts_valid_signature(self):
        body = b'{"x":1}'
        assert verify_signature("test-secret", body, sign_payload("test-secret", body))

    def test_rejects_tampered_body(self):
        signature = sign_payload("test-secret", b'{"x":1}')
        assert not verify_signature("test-secret", b'{"x":2}', signature)
