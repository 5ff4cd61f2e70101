"""Address Codec — parse and format 32-byte ledger addresses (base-58 text).

Invariants:
    - parse_address accepts only base-58 alphabet characters (no whitespace)
    - Decoded length must be exactly ADDRESS_LENGTH bytes
    - format_address(parse_address(x)) == x for every accepted x
    - No existence check: an unused but well-formed address is valid

Design Decisions:
    - Alphabet checked before decoding: base58.b58decode strips trailing
      whitespace, which would break the round-trip
    - label parameter carries the field name into the error message
"""

import base58
from solders.pubkey import Pubkey

from keyforge.core.domain_types import ADDRESS_LENGTH
from keyforge.core.errors import InvalidAddressError

_ALPHABET = frozenset(base58.BITCOIN_ALPHABET.decode("ascii"))


def parse_address(text: str, label: str = "address") -> Pubkey:
    """Decode base-58 address text into a Pubkey, or raise InvalidAddressError."""
    if not text:
        raise InvalidAddressError(label, "value is empty")
    bad = next((ch for ch in text if ch not in _ALPHABET), None)
    if bad is not None:
        raise InvalidAddressError(label, f"invalid base58 character {bad!r}")
    try:
        raw = base58.b58decode(text)
    except ValueError as exc:
        raise InvalidAddressError(label, str(exc)) from exc
    if len(raw) != ADDRESS_LENGTH:
        raise InvalidAddressError(
            label, f"decoded to {len(raw)} bytes, expected {ADDRESS_LENGTH}",
        )
    return Pubkey.from_bytes(raw)


def format_address(address: Pubkey) -> str:
    """Canonical base-58 text for an address."""
    return base58.b58encode(bytes(address)).decode("ascii")
