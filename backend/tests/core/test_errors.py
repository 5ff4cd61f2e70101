"""Error Hierarchy — verifies codes, statuses and the failure envelope.

Tests:
    - Every subclass is a KeyforgeError with a 400 status and a distinct code
    - to_response() is exactly {"success": False, "error": message}
    - InvalidRequestError defaults to the coarse boundary message
"""

import pytest

from keyforge.core.errors import (
    ErrorCategory, InstructionBuildError, InvalidAddressError, InvalidEncodingError,
    InvalidKeypairError, InvalidRequestError, InvalidSecretEncodingError,
    InvalidSignatureFormatError, KeyforgeError,
)

ALL_ERRORS = [
    InvalidAddressError("mint pubkey", "bad"),
    InvalidEncodingError("signature", "bad"),
    InvalidSecretEncodingError("bad"),
    InvalidKeypairError("bad"),
    InvalidSignatureFormatError(10),
    InvalidRequestError(),
    InstructionBuildError("mint-to", "bad"),
]


@pytest.mark.parametrize("error", ALL_ERRORS, ids=lambda e: type(e).__name__)
def test_errors_are_client_errors(error):
    assert isinstance(error, KeyforgeError)
    assert error.http_status == 400


def test_error_codes_are_distinct():
    codes = [e.code for e in ALL_ERRORS]
    assert len(set(codes)) == len(codes)


def test_to_response_is_failure_envelope():
    error = InvalidAddressError("mint pubkey", "value is empty")
    assert error.to_response() == {
        "success": False, "error": "Invalid mint pubkey: value is empty",
    }


def test_invalid_request_default_message():
    assert InvalidRequestError().message == "Missing required fields"


def test_address_error_context_carries_field():
    error = InvalidAddressError("owner address", "bad")
    assert error.context.field == "owner address"
    assert error.category == ErrorCategory.VALIDATION


def test_every_category_is_used():
    assert {e.category for e in ALL_ERRORS} == set(ErrorCategory)


def test_build_error_context_carries_operation():
    assert InstructionBuildError("mint-to", "bad").context.operation == "mint-to"
