"""Error Hierarchy — typed, categorized exceptions for every Keyforge failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error raised by core/ is local to one request and 400-level
    - to_response() produces the {"success": false, "error": ...} envelope
    - Messages name the offending field and the cause, never key material

Design Decisions:
    - Single hierarchy with KeyforgeError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Malformed signature is an error; a non-matching signature is a False result, not an error
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    ENCODING = "encoding"
    CRYPTOGRAPHY = "cryptography"
    INSTRUCTION = "instruction"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    field: str | None = None
    operation: str | None = None


class KeyforgeError(Exception):
    """Base exception for all Keyforge errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 400,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the failure envelope."""
        return {"success": False, "error": self.message}


# ─── Address & Encoding Errors ──────────────────────────────────

class InvalidAddressError(KeyforgeError):
    """Address text is not base-58 or does not decode to 32 bytes."""
    def __init__(self, label: str, cause: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext(field=label)
        super().__init__(
            f"Invalid {label}: {cause}",
            "INVALID_ADDRESS", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.label = label
        self.cause = cause


class InvalidEncodingError(KeyforgeError):
    """Base-64 payload text has bad padding or alphabet."""
    def __init__(self, label: str, cause: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext(field=label)
        super().__init__(
            f"Invalid base64 {label}: {cause}",
            "INVALID_ENCODING", ErrorCategory.ENCODING,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.label = label


class InvalidSecretEncodingError(KeyforgeError):
    """Secret text is not base-58 or does not decode to 64 bytes."""
    def __init__(self, cause: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext(field="secret")
        super().__init__(
            f"Invalid base58 secret key: {cause}",
            "INVALID_SECRET_ENCODING", ErrorCategory.ENCODING,
            ErrorSeverity.ERROR, ctx, 400,
        )


# ─── Cryptography Errors ────────────────────────────────────────

class InvalidKeypairError(KeyforgeError):
    """Secret bytes have the wrong length or an inconsistent public half."""
    def __init__(self, cause: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext(field="secret")
        super().__init__(
            f"Invalid secret key: {cause}",
            "INVALID_KEYPAIR", ErrorCategory.CRYPTOGRAPHY,
            ErrorSeverity.ERROR, ctx, 400,
        )


class InvalidSignatureFormatError(KeyforgeError):
    """Signature bytes cannot be parsed as a 64-byte ed25519 signature."""
    def __init__(self, length: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext(field="signature")
        super().__init__(
            f"Invalid signature format: expected 64 bytes, got {length}",
            "INVALID_SIGNATURE_FORMAT", ErrorCategory.CRYPTOGRAPHY,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.length = length


# ─── Request & Instruction Errors ───────────────────────────────

class InvalidRequestError(KeyforgeError):
    """Required field missing or empty, or numeric field out of range."""
    def __init__(
        self, message: str = "Missing required fields",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INVALID_REQUEST", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class InstructionBuildError(KeyforgeError):
    """Instruction layout rejected a parameter (e.g. decimals out of u8 range)."""
    def __init__(self, operation: str, cause: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext(operation=operation)
        super().__init__(
            f"Failed to build {operation} instruction: {cause}",
            "INSTRUCTION_BUILD_FAILED", ErrorCategory.INSTRUCTION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.operation = operation
