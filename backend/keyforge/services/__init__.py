"""Services Layer — shaping core results into API payloads.

Invariants:
    - No cryptography or byte layouts here; those live in core/
"""
