"""Infrastructure Layer — database lifecycle and logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Driver errors are mapped to DatabaseError before they leave this layer
"""
