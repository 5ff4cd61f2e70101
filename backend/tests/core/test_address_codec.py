"""Address Codec — tests for parse/format of 32-byte base-58 addresses.

Tests cover:
    - Known program ids parse and format back to the same text
    - Arbitrary 32-byte values round-trip byte-for-byte
    - Wrong decoded length, bad alphabet, whitespace and empty input fail
    - Error message carries the field label
"""

import base58
import pytest
from solders.pubkey import Pubkey

from keyforge.core.address_codec import format_address, parse_address
from keyforge.core.errors import InvalidAddressError

SYSTEM_PROGRAM = "11111111111111111111111111111111"
TOKEN_PROGRAM = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"


# ─── parse / format ──────────────────────────────────────────────

def test_parse_system_program_is_all_zero_bytes():
    assert bytes(parse_address(SYSTEM_PROGRAM)) == bytes(32)


@pytest.mark.parametrize("text", [SYSTEM_PROGRAM, TOKEN_PROGRAM])
def test_format_inverts_parse(text):
    assert format_address(parse_address(text)) == text


def test_parse_matches_solders():
    assert parse_address(TOKEN_PROGRAM) == Pubkey.from_string(TOKEN_PROGRAM)


def test_arbitrary_bytes_round_trip():
    raw = bytes(range(32))
    text = format_address(Pubkey.from_bytes(raw))
    assert bytes(parse_address(text)) == raw


def test_unused_address_is_accepted():
    text = str(Pubkey.new_unique())
    assert format_address(parse_address(text)) == text


# ─── failures ────────────────────────────────────────────────────

def test_short_decoded_length_rejected():
    with pytest.raises(InvalidAddressError, match="decoded to 31 bytes"):
        parse_address("1" * 31)


def test_long_decoded_length_rejected():
    text = base58.b58encode(b"\x01" * 33).decode()
    with pytest.raises(InvalidAddressError, match="expected 32"):
        parse_address(text)


@pytest.mark.parametrize("bad", ["0", "O", "I", "l", "+"])
def test_non_alphabet_character_rejected(bad):
    with pytest.raises(InvalidAddressError, match="invalid base58 character"):
        parse_address(TOKEN_PROGRAM[:-1] + bad)


def test_trailing_whitespace_rejected():
    with pytest.raises(InvalidAddressError):
        parse_address(TOKEN_PROGRAM + " ")


def test_empty_rejected():
    with pytest.raises(InvalidAddressError, match="empty"):
        parse_address("")


def test_error_message_names_field():
    with pytest.raises(InvalidAddressError) as exc_info:
        parse_address("not-an-address", "mint pubkey")
    assert exc_info.value.message.startswith("Invalid mint pubkey: ")
    assert exc_info.value.code == "INVALID_ADDRESS"
