"""Request Schemas — Pydantic models guarding the HTTP boundary.

Invariants:
    - Every required field must be present; missing fields never reach the core
    - SignMessageRequest.message and .secret are non-empty
    - message fields must encode as UTF-8 (no lone surrogates)
    - decimals is 0–255; amount and lamports are 0–2^64-1, strict integers
    - Address fields stay plain strings here — the Address Codec validates them
      so its error names the exact field and cause

Design Decisions:
    - JSON names kept from the public API (mintAuthority, from) via aliases
    - strict=True on integers: "5" or true are rejected, matching typed JSON clients
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from keyforge.core.domain_types import U8_MAX, U64_MAX


class CreateTokenRequest(BaseModel):
    """POST /token/create — InitializeMint parameters."""
    model_config = ConfigDict(populate_by_name=True)

    mint_authority: str = Field(alias="mintAuthority")
    mint: str
    decimals: int = Field(ge=0, le=U8_MAX, strict=True)
    freeze_authority: str | None = Field(None, alias="freezeAuthority")


class MintTokenRequest(BaseModel):
    """POST /token/mint — MintTo parameters."""
    mint: str
    destination: str
    authority: str
    amount: int = Field(ge=0, le=U64_MAX, strict=True)


def _check_utf8(v: str) -> str:
    """Messages are signed as UTF-8 bytes; lone surrogates cannot be encoded."""
    try:
        v.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ValueError("message must be encodable as UTF-8") from exc
    return v


class SignMessageRequest(BaseModel):
    """POST /message/sign — both fields must be non-empty."""
    message: str = Field(min_length=1)
    secret: str = Field(min_length=1)

    @field_validator("message")
    @classmethod
    def check_message_utf8(cls, v: str) -> str:
        return _check_utf8(v)


class VerifyMessageRequest(BaseModel):
    """POST /message/verify."""
    message: str
    signature: str
    pubkey: str

    @field_validator("message")
    @classmethod
    def check_message_utf8(cls, v: str) -> str:
        return _check_utf8(v)


class SendSolRequest(BaseModel):
    """POST /send/sol — native lamport transfer."""
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(alias="from")
    to: str
    lamports: int = Field(ge=0, le=U64_MAX, strict=True)


class SendTokenRequest(BaseModel):
    """POST /send/token — SPL token transfer from the owner's account."""
    destination: str
    mint: str
    owner: str
    amount: int = Field(ge=0, le=U64_MAX, strict=True)
