"""Message Routes — sign and verify arbitrary UTF-8 messages.

Invariants:
    - Empty message/secret is rejected by SignMessageRequest before the core runs
    - Secret text goes through the Secret codec (base-58), signatures through
      the Payload codec (base-64) — never the other way round
    - A non-matching signature is a 200 with valid=false, not an error
"""

import logging

from fastapi import APIRouter

from keyforge.core.address_codec import format_address, parse_address
from keyforge.core.encoding import decode_payload, decode_secret, encode_payload
from keyforge.core.keypair_engine import keypair_from_secret_bytes, public_address
from keyforge.core.signing import sign_message, verify_message
from keyforge.schemas.requests import SignMessageRequest, VerifyMessageRequest
from keyforge.schemas.responses import Envelope, SignMessageData, VerifyMessageData

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/message", tags=["message"])


@router.post("/sign", response_model=Envelope[SignMessageData])
async def sign(body: SignMessageRequest):
    keypair = keypair_from_secret_bytes(decode_secret(body.secret))
    signature = sign_message(keypair, body.message.encode("utf-8"))
    return Envelope[SignMessageData](data=SignMessageData(
        signature=encode_payload(signature),
        public_key=format_address(public_address(keypair)),
        message=body.message,
    ))


@router.post("/verify", response_model=Envelope[VerifyMessageData])
async def verify(body: VerifyMessageRequest):
    pubkey = parse_address(body.pubkey, "public key")
    signature = decode_payload(body.signature, "signature")
    valid = verify_message(pubkey, body.message.encode("utf-8"), signature)
    pubkey_text = format_address(pubkey)
    logger.info("Signature verified", extra={"pubkey": pubkey_text})
    return Envelope[VerifyMessageData](data=VerifyMessageData(
        valid=valid, message=body.message, pubkey=pubkey_text,
    ))
