"""Settings — driver-qualified URLs and defaults."""

from yelpcamp.config import Settings


def test_postgres_url_gets_async_driver():
    settings = Settings(database_url="postgresql://camp:secret@db/yelp")
    assert settings.database_url == "postgresql+asyncpg://camp:secret@db/yelp"


def test_plain_sqlite_url_gets_async_driver():
    settings = Settings(database_url="sqlite:///./camp.db")
    assert settings.database_url == "sqlite+aiosqlite:///./camp.db"


def test_async_urls_are_untouched():
    url = "sqlite+aiosqlite:///:memory:"
    assert Settings(database_url=url).database_url == url


def test_defaults():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert settings.port == 3000
    assert settings.delete_orphan_reviews is False
    assert settings.database_create_schema is True
