"""API Layer — HTML routes, payload dependencies, method override, error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every route either renders a template or redirects; failures are raised, never rendered inline

Design Decisions:
    - Thin routes delegate to services/ stores
"""
