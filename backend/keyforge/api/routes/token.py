"""Token Routes — SPL Token mint initialization and minting.

Invariants:
    - Every address is parsed by the Address Codec with its own field label
    - Routes contain no byte layouts (delegated to core.build_instructions)
"""

from fastapi import APIRouter

from keyforge.core.address_codec import parse_address
from keyforge.core.build_instructions import build_initialize_mint, build_mint_to
from keyforge.core.domain_types import Decimals, TokenAmount
from keyforge.schemas.requests import CreateTokenRequest, MintTokenRequest
from keyforge.schemas.responses import Envelope, InstructionData
from keyforge.services.present_instruction import present_instruction

router = APIRouter(prefix="/token", tags=["token"])


@router.post("/create", response_model=Envelope[InstructionData])
async def create_token(body: CreateTokenRequest):
    """Build InitializeMint for a new mint."""
    mint_authority = parse_address(body.mint_authority, "mint authority pubkey")
    mint = parse_address(body.mint, "mint pubkey")
    freeze_authority = (
        parse_address(body.freeze_authority, "freeze authority pubkey")
        if body.freeze_authority is not None else None
    )
    instruction = build_initialize_mint(
        mint, mint_authority, Decimals(body.decimals), freeze_authority,
    )
    return Envelope[InstructionData](data=present_instruction(instruction))


@router.post("/mint", response_model=Envelope[InstructionData])
async def mint_token(body: MintTokenRequest):
    """Build MintTo from authority into destination."""
    mint = parse_address(body.mint, "mint pubkey")
    destination = parse_address(body.destination, "destination pubkey")
    authority = parse_address(body.authority, "authority pubkey")
    instruction = build_mint_to(mint, destination, authority, TokenAmount(body.amount))
    return Envelope[InstructionData](data=present_instruction(instruction))
