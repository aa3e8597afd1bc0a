"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix, tags and ErrorWrappingRoute
    - Routes never contain business logic (delegate to services/ stores)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
    - Static segments (/campgrounds/new) registered before parameterized ones
"""
