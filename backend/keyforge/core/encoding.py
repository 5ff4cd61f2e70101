"""Encoding Utilities — the two binary-to-text codecs, kept deliberately apart.

Invariants:
    - Payload codec (base-64) carries instruction data and signatures
    - Secret codec (base-58) carries the 64-byte keypair secret, nothing else
    - No shared encode()/decode(): each codec is a distinct named operation
    - Decoders validate strictly; no silent truncation or padding repair

Design Decisions:
    - base64 with validate=True: rejects stray characters instead of skipping them
    - Secret length checked here so a 32-byte seed can never pass as a secret
"""

import base64
import binascii

import base58

from keyforge.core.domain_types import SECRET_LENGTH
from keyforge.core.errors import InvalidEncodingError, InvalidSecretEncodingError


# ─── Payload Codec (base-64) ─────────────────────────────────────

def encode_payload(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def decode_payload(text: str, label: str = "payload") -> bytes:
    """Strict standard base-64 decode."""
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidEncodingError(label, str(exc)) from exc


# ─── Secret Codec (base-58, 64 bytes) ────────────────────────────

def encode_secret(secret: bytes) -> str:
    if len(secret) != SECRET_LENGTH:
        raise InvalidSecretEncodingError(
            f"expected {SECRET_LENGTH} bytes, got {len(secret)}",
        )
    return base58.b58encode(secret).decode("ascii")


def decode_secret(text: str) -> bytes:
    """Decode base-58 secret text; the result is always exactly 64 bytes."""
    if not text or text != text.strip():
        raise InvalidSecretEncodingError("value is empty or padded with whitespace")
    try:
        raw = base58.b58decode(text)
    except ValueError as exc:
        raise InvalidSecretEncodingError(str(exc)) from exc
    if len(raw) != SECRET_LENGTH:
        raise InvalidSecretEncodingError(
            f"decoded to {len(raw)} bytes, expected {SECRET_LENGTH}",
        )
    return raw
