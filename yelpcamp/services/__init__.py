"""Services Layer — resource stores that own the campground/review lifecycle rules.

Invariants:
    - Each store wraps one AsyncSession supplied by the caller
    - Every public mutation commits exactly once (one transaction per operation)

Design Decisions:
    - One store per aggregate for locality (ADR: no god objects)
"""
