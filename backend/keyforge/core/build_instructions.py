"""Instruction Builders — pure construction of SPL Token and System instructions.

Invariants:
    - All functions are PURE: no IO, no keys, no network
    - Account order is the program's fixed contract and is never rearranged
    - "signer" flags declare who must sign before submission; nothing is signed here
    - Scalars outside their wire width raise InstructionBuildError

Design Decisions:
    - SPL Token payloads packed with struct: the layout is a fixed tag + LE ints,
      not borsh, and COption<Pubkey> uses a 1-byte tag with no padding when None
    - Native transfer delegates to solders.system_program.transfer so the
      system program layout comes from the ledger's own implementation
"""

import struct

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey
from solders.system_program import TransferParams, transfer

from keyforge.core.domain_types import (
    RENT_SYSVAR_ID, TOKEN_PROGRAM_ID,
    Decimals, Lamports, TokenAmount,
    TokenInstruction, U8_MAX, U64_MAX,
)
from keyforge.core.errors import InstructionBuildError


def _check_u8(operation: str, name: str, value: int) -> None:
    if not 0 <= value <= U8_MAX:
        raise InstructionBuildError(
            operation, f"{name} must be between 0 and {U8_MAX}, got {value}",
        )


def _check_u64(operation: str, name: str, value: int) -> None:
    if not 0 <= value <= U64_MAX:
        raise InstructionBuildError(
            operation, f"{name} must be between 0 and {U64_MAX}, got {value}",
        )


def _pack_optional_pubkey(pubkey: Pubkey | None) -> bytes:
    if pubkey is None:
        return b"\x00"
    return b"\x01" + bytes(pubkey)


# ─── SPL Token ───────────────────────────────────────────────────

def build_initialize_mint(
    mint: Pubkey,
    mint_authority: Pubkey,
    decimals: Decimals,
    freeze_authority: Pubkey | None = None,
) -> Instruction:
    """InitializeMint: [mint (w), rent sysvar (ro)]."""
    _check_u8("initialize mint", "decimals", decimals)
    data = (
        struct.pack("<BB", TokenInstruction.INITIALIZE_MINT, decimals)
        + bytes(mint_authority)
        + _pack_optional_pubkey(freeze_authority)
    )
    accounts = [
        AccountMeta(mint, is_signer=False, is_writable=True),
        AccountMeta(RENT_SYSVAR_ID, is_signer=False, is_writable=False),
    ]
    return Instruction(TOKEN_PROGRAM_ID, data, accounts)


def build_mint_to(
    mint: Pubkey, destination: Pubkey, authority: Pubkey, amount: TokenAmount,
) -> Instruction:
    """MintTo: [mint (w), destination (w), authority (signer)]."""
    _check_u64("mint-to", "amount", amount)
    data = struct.pack("<BQ", TokenInstruction.MINT_TO, amount)
    accounts = [
        AccountMeta(mint, is_signer=False, is_writable=True),
        AccountMeta(destination, is_signer=False, is_writable=True),
        AccountMeta(authority, is_signer=True, is_writable=False),
    ]
    return Instruction(TOKEN_PROGRAM_ID, data, accounts)


def build_token_transfer(
    source: Pubkey, destination: Pubkey, owner: Pubkey, amount: TokenAmount,
) -> Instruction:
    """Transfer: [source (w), destination (w), owner (signer)]."""
    _check_u64("token transfer", "amount", amount)
    data = struct.pack("<BQ", TokenInstruction.TRANSFER, amount)
    accounts = [
        AccountMeta(source, is_signer=False, is_writable=True),
        AccountMeta(destination, is_signer=False, is_writable=True),
        AccountMeta(owner, is_signer=True, is_writable=False),
    ]
    return Instruction(TOKEN_PROGRAM_ID, data, accounts)


# ─── System Program ──────────────────────────────────────────────

def build_native_transfer(
    from_pubkey: Pubkey, to_pubkey: Pubkey, lamports: Lamports,
) -> Instruction:
    """System transfer: [from (signer, w), to (w)], data = u32 2 + u64 lamports."""
    _check_u64("native transfer", "lamports", lamports)
    return transfer(TransferParams(
        from_pubkey=from_pubkey, to_pubkey=to_pubkey, lamports=lamports,
    ))
