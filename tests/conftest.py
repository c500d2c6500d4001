import pytest

from tower_vector.numeric import settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolates every test from environment overrides and configure() calls."""
    monkeypatch.delenv(settings.TOLERANCE_ENV, raising=False)
    monkeypatch.delenv(settings.KERNEL_THRESHOLD_ENV, raising=False)
    settings.reset_settings()
    yield
    settings.reset_settings()
