"""Keypair Route — POST /keypair generates a fresh ed25519 keypair.

Invariants:
    - The secret is returned to the caller and nowhere else (no log, no storage)
    - Randomness comes from the get_random_source dependency
"""

import logging

from fastapi import APIRouter, Depends

from keyforge.core.address_codec import format_address
from keyforge.core.encoding import encode_secret
from keyforge.core.entropy_protocols import RandomSource
from keyforge.core.keypair_engine import generate_keypair, public_address, secret_bytes
from keyforge.infrastructure.entropy import get_random_source
from keyforge.schemas.responses import Envelope, KeypairData

logger = logging.getLogger(__name__)
router = APIRouter(tags=["keypair"])


@router.post("/keypair", response_model=Envelope[KeypairData])
async def create_keypair(
    random_source: RandomSource = Depends(get_random_source),
):
    keypair = generate_keypair(random_source)
    pubkey = format_address(public_address(keypair))
    logger.info("Keypair generated", extra={"pubkey": pubkey})
    return Envelope[KeypairData](
        data=KeypairData(pubkey=pubkey, secret=encode_secret(secret_bytes(keypair))),
    )
