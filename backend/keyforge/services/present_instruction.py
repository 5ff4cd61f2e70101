"""Instruction Presentation — turns solders Instructions into response payloads.

Invariants:
    - Account order in the output equals account order in the Instruction
    - instruction_data always goes through the Payload codec (base-64)
    - Addresses always go through format_address (base-58)

Design Decisions:
    - Three shapes, one per route family, so /send/* keep their narrower
      account lists without special-casing inside the routes
"""

import logging

from solders.instruction import Instruction

from keyforge.core.address_codec import format_address
from keyforge.core.encoding import encode_payload
from keyforge.schemas.responses import (
    AccountMetaData, InstructionData, SignerAccountData,
    SolTransferData, TokenTransferData,
)

logger = logging.getLogger(__name__)


def _log_built(instruction: Instruction) -> None:
    logger.info(
        "Instruction built",
        extra={
            "program_id": format_address(instruction.program_id),
            "account_count": len(instruction.accounts),
        },
    )


def present_instruction(instruction: Instruction) -> InstructionData:
    """Full account metadata: pubkey, is_signer, is_writable."""
    _log_built(instruction)
    return InstructionData(
        program_id=format_address(instruction.program_id),
        accounts=[
            AccountMetaData(
                pubkey=format_address(meta.pubkey),
                is_signer=meta.is_signer,
                is_writable=meta.is_writable,
            )
            for meta in instruction.accounts
        ],
        instruction_data=encode_payload(bytes(instruction.data)),
    )


def present_sol_transfer(instruction: Instruction) -> SolTransferData:
    """Accounts as bare address strings: [from, to]."""
    _log_built(instruction)
    return SolTransferData(
        program_id=format_address(instruction.program_id),
        accounts=[format_address(meta.pubkey) for meta in instruction.accounts],
        instruction_data=encode_payload(bytes(instruction.data)),
    )


def present_token_transfer(instruction: Instruction) -> TokenTransferData:
    """Accounts as pubkey + is_signer."""
    _log_built(instruction)
    return TokenTransferData(
        program_id=format_address(instruction.program_id),
        accounts=[
            SignerAccountData(
                pubkey=format_address(meta.pubkey), is_signer=meta.is_signer,
            )
            for meta in instruction.accounts
        ],
        instruction_data=encode_payload(bytes(instruction.data)),
    )
