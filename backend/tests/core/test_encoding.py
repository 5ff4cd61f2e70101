"""Encoding Utilities — tests for the Payload (base-64) and Secret (base-58) codecs.

Tests cover:
    - Payload codec decodes what it encodes, rejects bad padding and alphabet
    - Secret codec accepts only 64-byte values in both directions
    - The codecs are not interchangeable: base-64 secret text is rejected
"""

import base64

import base58
import pytest

from keyforge.core.encoding import (
    decode_payload, decode_secret, encode_payload, encode_secret,
)
from keyforge.core.errors import InvalidEncodingError, InvalidSecretEncodingError

SECRET = bytes(range(64))


# ─── Payload codec ───────────────────────────────────────────────

def test_payload_encode_is_standard_base64():
    assert encode_payload(b"\x07\x00\x01") == "BwAB"


def test_payload_decode_inverts_encode():
    data = b"\x00\xff" * 20
    assert decode_payload(encode_payload(data)) == data


def test_payload_decode_rejects_bad_padding():
    with pytest.raises(InvalidEncodingError):
        decode_payload("abc")


def test_payload_decode_rejects_non_alphabet():
    with pytest.raises(InvalidEncodingError, match="Invalid base64 signature"):
        decode_payload("@@@@", "signature")


def test_payload_decode_empty_is_empty_bytes():
    assert decode_payload("") == b""


# ─── Secret codec ────────────────────────────────────────────────

def test_secret_decode_inverts_encode():
    assert decode_secret(encode_secret(SECRET)) == SECRET


def test_secret_encode_rejects_wrong_length():
    with pytest.raises(InvalidSecretEncodingError):
        encode_secret(SECRET[:32])


def test_secret_decode_rejects_seed_only():
    with pytest.raises(InvalidSecretEncodingError, match="decoded to 32 bytes"):
        decode_secret(base58.b58encode(SECRET[:32]).decode())


def test_secret_decode_rejects_invalid_character():
    with pytest.raises(InvalidSecretEncodingError):
        decode_secret("0OIl")


def test_secret_decode_rejects_empty():
    with pytest.raises(InvalidSecretEncodingError):
        decode_secret("")


def test_secret_decode_rejects_base64_text():
    b64 = base64.b64encode(SECRET).decode()
    assert b64.endswith("==")
    with pytest.raises(InvalidSecretEncodingError):
        decode_secret(b64)


def test_secret_error_has_distinct_code():
    with pytest.raises(InvalidSecretEncodingError) as exc_info:
        decode_secret("1")
    assert exc_info.value.code == "INVALID_SECRET_ENCODING"
