"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes contain no business rules; they delegate to services/

Design Decisions:
    - Status codes come from the error hierarchy (error_handlers.py), never from routes
"""
