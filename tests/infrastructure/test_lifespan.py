"""Application lifespan — the database manager exists only while the app runs."""

import pytest

from yelpcamp.config import Settings
from yelpcamp.core.errors import DatabaseError
from yelpcamp.main import create_app


async def test_lifespan_builds_and_disposes_manager():
    app = create_app(Settings(database_url="sqlite+aiosqlite:///:memory:", log_format="text"))
    assert app.state.db_manager is None

    async with app.router.lifespan_context(app):
        assert app.state.db_manager is not None
        assert await app.state.db_manager.health_check() is True

    assert app.state.db_manager is None


async def test_lifespan_fails_when_database_unreachable():
    app = create_app(Settings(
        database_url="sqlite+aiosqlite:////nonexistent-dir/sub/yelp-camp.db",
        log_format="text",
    ))
    with pytest.raises(DatabaseError):
        async with app.router.lifespan_context(app):
            pass
    assert app.state.db_manager is None
