import pytest

from cedula.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("CEDULA_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CEDULA_OUTPUT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
