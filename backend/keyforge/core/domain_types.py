"""Domain Types — fixed sizes, program ids and opcodes shared across the core.

Invariants:
    - Addresses are solders Pubkey values (32 bytes) — never bare strings in core logic
    - Program ids and sysvars are module constants, never rebuilt per request
    - Opcodes match the on-chain program layouts byte-for-byte

Design Decisions:
    - solders types over home-made wrappers: the ledger's own Rust types, exact layouts
    - IntEnum opcodes: pack directly with struct, readable in tests
"""

from enum import IntEnum
from typing import Final, NewType

from solders.pubkey import Pubkey
from solders.system_program import ID as _SYSTEM_PROGRAM_ID
from solders.sysvar import RENT as _RENT_SYSVAR


# ─── Sizes ───────────────────────────────────────────────────────

ADDRESS_LENGTH: Final[int] = 32
SEED_LENGTH: Final[int] = 32
SECRET_LENGTH: Final[int] = 64
SIGNATURE_LENGTH: Final[int] = 64

U8_MAX: Final[int] = 2**8 - 1
U64_MAX: Final[int] = 2**64 - 1


# ─── Value Types ─────────────────────────────────────────────────

Lamports = NewType("Lamports", int)        # 0..U64_MAX
TokenAmount = NewType("TokenAmount", int)  # 0..U64_MAX, base units
Decimals = NewType("Decimals", int)        # 0..U8_MAX


# ─── Program Ids ─────────────────────────────────────────────────

SYSTEM_PROGRAM_ID: Final[Pubkey] = _SYSTEM_PROGRAM_ID
TOKEN_PROGRAM_ID: Final[Pubkey] = Pubkey.from_string(
    "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
)
RENT_SYSVAR_ID: Final[Pubkey] = _RENT_SYSVAR


# ─── Opcodes ─────────────────────────────────────────────────────

class TokenInstruction(IntEnum):
    """SPL Token instruction tags (first payload byte)."""
    INITIALIZE_MINT = 0
    TRANSFER = 3
    MINT_TO = 7
