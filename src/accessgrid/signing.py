"""
Request signing for the AccessGrid API.

Every request carries an ``X-PAYLOAD-SIG`` header. The signature is the
lowercase hex HMAC-SHA256, keyed by the account secret, of the *base64
encoding* of the serialized JSON body. Requests without a body are signed as
if the body were the two bytes ``{}``.

Usage:
    body = serialize_body({"card_template_id": "0xd3adb00b5"})
    headers["X-PAYLOAD-SIG"] = sign_payload(secret_key, body)
"""
from __future__ import annotations

import base64
import hashlib
import hmac
import json
from typing import Any, Optional

EMPTY_PAYLOAD = b"{}"


def serialize_body(body: Any) -> Optional[bytes]:
    """Serialize a request body to the exact bytes that are sent and signed.

    Returns ``None`` when there is no body.
    """
    if body is None:
        return None
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def sign_payload(secret_key: str, payload: Optional[bytes]) -> str:
    """Compute the ``X-PAYLOAD-SIG`` value for a serialized body.

    Args:
        secret_key: Account secret used as the HMAC key
        payload: Serialized request body, or None for bodiless requests

    Returns:
        Hex-encoded HMAC-SHA256 digest
    """
    if not payload:
        payload = EMPTY_PAYLOAD
    encoded = base64.b64encode(payload)
    return hmac.new(secret_key.encode("utf-8"), encoded, hashlib.sha256).hexdigest()


def verify_signature(secret_key: str, payload: Optional[bytes], signature: str) -> bool:
    """Check a signature against a payload in constant time."""
    expected = sign_payload(secret_key, payload)
    return hmac.compare_digest(expected, signature.lower())


__all__ = ["EMPTY_PAYLOAD", "serialize_body", "sign_payload", "verify_signature"]
