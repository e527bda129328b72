"""Settings — defaults and environment coercion."""

from weightrange.config import Settings
from weightrange.core.domain_types import CounterBackend, CounterPolicy


def test_defaults(monkeypatch):
    monkeypatch.delenv("COUNTER_BACKEND", raising=False)
    monkeypatch.delenv("USAGE_FILE", raising=False)
    settings = Settings(_env_file=None)
    assert settings.counter_backend is CounterBackend.JSON
    assert settings.counter_policy is CounterPolicy.SERIALIZED
    assert settings.usage_file == "usage.json"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("COUNTER_BACKEND", "database")
    monkeypatch.setenv("COUNTER_POLICY", "lossy")
    settings = Settings(_env_file=None)
    assert settings.counter_backend is CounterBackend.DATABASE
    assert settings.counter_policy is CounterPolicy.LOSSY


def test_postgres_url_gets_asyncpg_driver():
    settings = Settings(_env_file=None, database_url="postgresql://u:p@db:5432/usage")
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/usage"
