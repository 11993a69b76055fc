import pytest

_TRY_ENV_KEYS = ("TRY_INTERACTIVE", "TRY_COLOR", "TRY_DEBUG", "SHELL")


@pytest.fixture(autouse=True)
def _clean_try_environment(monkeypatch):
    """Start every test without trycmd's environment options set."""
    for key in _TRY_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
