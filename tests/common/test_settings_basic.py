import pytest
from pydantic import ValidationError

from galleryfeed.common import settings as s


@pytest.fixture()
def fresh_settings():
    # ensure a clean cache per test, and leave a clean one behind
    s.get_settings.cache_clear()
    yield s.get_settings
    s.get_settings.cache_clear()


def test_defaults(fresh_settings, monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    cfg = fresh_settings()
    assert cfg.feed.default_limit == 20
    assert cfg.feed.max_limit == 100
    assert cfg.api.prefix == "/api"
    assert cfg.database_url.startswith("postgresql+psycopg://")
    assert cfg.db_schema == cfg.db.schema_name


def test_nested_env_override(fresh_settings, monkeypatch):
    monkeypatch.setenv("FEED__MAX_LIMIT", "50")
    monkeypatch.setenv("FEED__DEFAULT_LIMIT", "10")
    cfg = fresh_settings()
    assert cfg.feed.max_limit == 50
    assert cfg.feed.default_limit == 10


def test_database_url_wins(fresh_settings, monkeypatch):
    url = "postgresql+psycopg://u:p@db.internal:5433/media"
    monkeypatch.setenv("DATABASE_URL", url)
    assert fresh_settings().database_url == url


def test_default_limit_cannot_exceed_max():
    with pytest.raises(ValidationError):
        s.FeedConfig(default_limit=200, max_limit=100)


def test_settings_cached(fresh_settings):
    assert fresh_settings() is fresh_settings()
