"""Core Layer — pure domain logic, no IO, no async, no logging.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - All functions are pure and deterministic given their inputs
      (keypair generation is deterministic given its RandomSource)

Design Decisions:
    - Functional core separated from imperative shell (ADR: ExMA impureim sandwich)
"""
