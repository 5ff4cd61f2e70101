"""Signing & Verification Engine — detached ed25519 signatures over raw bytes.

Invariants:
    - sign_message is deterministic and total (empty message included)
    - verify_message raises InvalidSignatureFormatError for length != 64
    - A well-formed signature that does not match returns False, never raises

Design Decisions:
    - Empty-message rejection lives in the request schema, not here
"""

from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature

from keyforge.core.domain_types import SIGNATURE_LENGTH
from keyforge.core.errors import InvalidSignatureFormatError


def sign_message(keypair: Keypair, message: bytes) -> bytes:
    return bytes(keypair.sign_message(message))


def verify_message(pubkey: Pubkey, message: bytes, signature: bytes) -> bool:
    """Check signature against message and pubkey.

    Returns False for a well-formed signature that does not authenticate the
    message; raises InvalidSignatureFormatError when the bytes cannot be a
    signature at all.
    """
    if len(signature) != SIGNATURE_LENGTH:
        raise InvalidSignatureFormatError(len(signature))
    try:
        parsed = Signature.from_bytes(signature)
    except ValueError as exc:
        raise InvalidSignatureFormatError(len(signature)) from exc
    return parsed.verify(pubkey, message)
