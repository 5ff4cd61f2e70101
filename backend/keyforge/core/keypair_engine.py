"""Keypair Engine — generate ed25519 keypairs and rebuild them from secret bytes.

Invariants:
    - Seeds come only from the injected RandomSource (never a caller seed)
    - keypair_from_secret_bytes rejects any length other than 64
    - The public half of a 64-byte secret must equal the key derived from its seed
    - Key material is never logged or stored

Design Decisions:
    - Consistency checked explicitly via Keypair.from_seed: the 64-byte
      constructor alone does not guarantee the halves agree
"""

from solders.keypair import Keypair
from solders.pubkey import Pubkey

from keyforge.core.domain_types import SECRET_LENGTH, SEED_LENGTH
from keyforge.core.entropy_protocols import RandomSource
from keyforge.core.errors import InvalidKeypairError


def generate_keypair(random_source: RandomSource) -> Keypair:
    """Fresh keypair from SEED_LENGTH bytes of the given random source."""
    seed = random_source(SEED_LENGTH)
    if len(seed) != SEED_LENGTH:
        raise RuntimeError(
            f"random source returned {len(seed)} bytes, expected {SEED_LENGTH}",
        )
    return Keypair.from_seed(seed)


def keypair_from_secret_bytes(secret: bytes) -> Keypair:
    """Rebuild a keypair from seed || public key, validating both halves."""
    if len(secret) != SECRET_LENGTH:
        raise InvalidKeypairError(
            f"expected {SECRET_LENGTH} bytes, got {len(secret)}",
        )
    seed, embedded_public = secret[:SEED_LENGTH], secret[SEED_LENGTH:]
    derived = Keypair.from_seed(seed)
    if bytes(derived.pubkey()) != embedded_public:
        raise InvalidKeypairError("public key does not match seed")
    return derived


def secret_bytes(keypair: Keypair) -> bytes:
    return bytes(keypair)


def public_address(keypair: Keypair) -> Pubkey:
    return keypair.pubkey()
