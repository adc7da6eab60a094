"""Compute and check the HMAC signature on a canvas signed request."""

from base64 import b64encode
import hashlib
import hmac


def sign(encoded_payload: str, secret: str) -> str:
    """Generate the base64-encoded HMAC-SHA256 signature for a payload."""
    digest = hmac.new(secret.encode('utf-8'), encoded_payload.encode('utf-8'),
                      hashlib.sha256).digest()
    return b64encode(digest).decode('ascii')


def verify(encoded_payload: str, signature: str, secret: str) -> bool:
    """
    Check that ``signature`` was produced from ``encoded_payload``.

    The comparison takes the same time whether or not the signatures share a
    prefix. An empty signature never matches.
    """
    if not signature:
        return False
    expected = sign(encoded_payload, secret)
    return hmac.compare_digest(expected.encode('utf-8'),
                               signature.encode('utf-8'))
