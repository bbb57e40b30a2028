import pytest

from app.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in ("LOAN_CURRENCY_SYMBOL", "LOAN_DISPLAY_DECIMALS", "LOAN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
