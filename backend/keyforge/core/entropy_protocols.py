"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Randomness reaches the core only through RandomSource

Design Decisions:
    - Protocol over ABC: structural subtyping, any callable(size) -> bytes fits
      (secrets.token_bytes, os.urandom, a deterministic test stub)
"""

from typing import Protocol


class RandomSource(Protocol):
    """Contract for a cryptographically secure byte source — implemented by shell."""
    def __call__(self, size: int) -> bytes: ...
