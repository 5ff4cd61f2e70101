"""Entropy — the process CSPRNG, exposed as a RandomSource for injection.

Invariants:
    - Backed by the OS CSPRNG (secrets.token_bytes); safe for concurrent use
    - get_random_source is the only way routes obtain randomness

Design Decisions:
    - FastAPI dependency over module global: tests swap it via
      app.dependency_overrides without patching modules
"""

import secrets

from keyforge.core.entropy_protocols import RandomSource


def system_random_source(size: int) -> bytes:
    return secrets.token_bytes(size)


def get_random_source() -> RandomSource:
    """FastAPI dependency — yields the OS-backed random source."""
    return system_random_source
