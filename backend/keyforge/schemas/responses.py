"""Response Schemas — success envelope and per-route payloads.

Invariants:
    - Every success body is {"success": true, "data": <payload>}
    - Failure bodies are produced by KeyforgeError.to_response(), not here
    - KeypairData is the only model that ever carries a secret; it is returned,
      never logged

Design Decisions:
    - Generic Envelope[T]: one envelope shape, typed payload per route
    - /send/sol and /send/token keep their narrower account shapes
      (address strings; pubkey + is_signer) for wire compatibility
"""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    success: bool = True
    data: T


class KeypairData(BaseModel):
    pubkey: str
    secret: str


class AccountMetaData(BaseModel):
    pubkey: str
    is_signer: bool
    is_writable: bool


class SignerAccountData(BaseModel):
    pubkey: str
    is_signer: bool


class InstructionData(BaseModel):
    """Instruction with full account metadata (token create/mint)."""
    program_id: str
    accounts: list[AccountMetaData]
    instruction_data: str


class SolTransferData(BaseModel):
    program_id: str
    accounts: list[str]
    instruction_data: str


class TokenTransferData(BaseModel):
    program_id: str
    accounts: list[SignerAccountData]
    instruction_data: str


class SignMessageData(BaseModel):
    signature: str
    public_key: str
    message: str


class VerifyMessageData(BaseModel):
    valid: bool
    message: str
    pubkey: str
