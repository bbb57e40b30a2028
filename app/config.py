import logging
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_CURRENCY_SYMBOL = "$"
DEFAULT_DISPLAY_DECIMALS = 2
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    display_decimals: int = DEFAULT_DISPLAY_DECIMALS
    log_level: str = DEFAULT_LOG_LEVEL


_settings: Optional[Settings] = None


def _read_decimals(raw: Optional[str]) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_DISPLAY_DECIMALS
    try:
        decimals = int(raw)
    except ValueError as e:
        raise ValueError(f"LOAN_DISPLAY_DECIMALS must be an integer, got {raw!r}") from e
    if decimals < 0:
        raise ValueError(f"LOAN_DISPLAY_DECIMALS must be >= 0, got {decimals}")
    return decimals


def _read_log_level(raw: Optional[str]) -> str:
    level = (raw or DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"LOAN_LOG_LEVEL must be a logging level name, got {raw!r}")
    return level


def load_settings() -> Settings:
    return Settings(
        currency_symbol=os.getenv("LOAN_CURRENCY_SYMBOL", DEFAULT_CURRENCY_SYMBOL),
        display_decimals=_read_decimals(os.getenv("LOAN_DISPLAY_DECIMALS")),
        log_level=_read_log_level(os.getenv("LOAN_LOG_LEVEL")),
    )


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=level or get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
