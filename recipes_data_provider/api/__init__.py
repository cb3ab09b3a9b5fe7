"""API Layer — FastAPI routes, controller, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses (204 has no body)

Design Decisions:
    - Thin routes delegate to RecipeController (ADR: impureim sandwich)
"""
