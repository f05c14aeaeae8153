"""API Layer — FastAPI routes, outcome rendering and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All error bodies share the {"error": {...}} envelope
"""
