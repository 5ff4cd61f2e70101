"""Schemas — Pydantic request/response models for the API boundary.

Invariants:
    - Request models validate shape and ranges only; addresses and keys are
      parsed by core/ so errors stay field-specific
"""
