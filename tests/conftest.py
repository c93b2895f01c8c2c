import pytest


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("JSON_LOGS", "false")
    monkeypatch.setenv("DEFAULT_PRECISION", "32")
    monkeypatch.setenv("ROUNDING_MODE", "HALF_EVEN")
    monkeypatch.setenv("NEWTON_MAX_ITERATIONS", "1000")
    monkeypatch.setenv("BISECTION_MAX_ITERATIONS", "10000")

    from bigdec.shared.config import get_settings

    get_settings.cache_clear()
