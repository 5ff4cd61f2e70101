"""Infrastructure Layer — logging setup and the process random source.

Invariants:
    - The only modules allowed to touch process-wide resources (root logger, CSPRNG)
"""
