"""Database Package — declarative Base shared by models and migrations.

Invariants:
    - Engines and sessions live in infrastructure/database.py, never here

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for local and test runs
"""
