"""API Layer — FastAPI routes, dependency providers and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON

Design Decisions:
    - Thin routes delegate to core/ (functional core, imperative shell)
"""
