"""Send Routes — native lamport transfer and SPL token transfer.

Invariants:
    - /send/token parses mint for validation but does not place it in the instruction
    - /send/token uses owner as both source account and signing authority
"""

from fastapi import APIRouter

from keyforge.core.address_codec import parse_address
from keyforge.core.build_instructions import build_native_transfer, build_token_transfer
from keyforge.core.domain_types import Lamports, TokenAmount
from keyforge.schemas.requests import SendSolRequest, SendTokenRequest
from keyforge.schemas.responses import Envelope, SolTransferData, TokenTransferData
from keyforge.services.present_instruction import (
    present_sol_transfer, present_token_transfer,
)

router = APIRouter(prefix="/send", tags=["send"])


@router.post("/sol", response_model=Envelope[SolTransferData])
async def send_sol(body: SendSolRequest):
    sender = parse_address(body.from_, "sender address")
    recipient = parse_address(body.to, "recipient address")
    instruction = build_native_transfer(sender, recipient, Lamports(body.lamports))
    return Envelope[SolTransferData](data=present_sol_transfer(instruction))


@router.post("/token", response_model=Envelope[TokenTransferData])
async def send_token(body: SendTokenRequest):
    destination = parse_address(body.destination, "destination address")
    parse_address(body.mint, "mint address")
    owner = parse_address(body.owner, "owner address")
    # TODO: accept a separate source token account once delegated transfers are supported
    instruction = build_token_transfer(owner, destination, owner, TokenAmount(body.amount))
    return Envelope[TokenTransferData](data=present_token_transfer(instruction))
