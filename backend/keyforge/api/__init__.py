"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return {"success": ..., "data" | "error": ...} envelopes

Design Decisions:
    - Thin routes delegate to core (ADR: ExMA impureim sandwich)
"""
