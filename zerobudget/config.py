import json
import os
from pathlib import Path
from datetime import datetime

import structlog
from pydantic import BaseModel, ValidationError, field_validator

logger = structlog.get_logger()

# Data directory — use BUDGET_DATA_DIR env var if set (e.g. /data in Docker),
# otherwise fall back to ~/.config/zerobudget for local dev
DEFAULT_CONFIG_DIR = Path.home() / ".config" / "zerobudget"
PREFERENCES_FILENAME = "preferences.json"

# (symbol, decimal places) per supported currency
CURRENCIES: dict[str, tuple[str, int]] = {
    "USD": ("$", 2),
    "CAD": ("CA$", 2),
    "AUD": ("A$", 2),
    "EUR": ("€", 2),
    "GBP": ("£", 2),
    "CHF": ("CHF ", 2),
    "INR": ("₹", 2),
    "JPY": ("¥", 0),
}

# Allowed browser origins for the API (Vite dev server by default)
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        "BUDGET_CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173"
    ).split(",")
    if origin.strip()
]


class Preferences(BaseModel):
    """User display preferences, passed explicitly to formatting functions."""
    currency: str = "USD"
    updated_at: datetime | None = None

    @field_validator("currency")
    @classmethod
    def _known_currency(cls, value: str) -> str:
        value = value.upper()
        if value not in CURRENCIES:
            raise ValueError(f"Unsupported currency: {value}")
        return value


def config_dir() -> Path:
    """Resolve the config directory from the environment on every call."""
    data_dir = os.environ.get("BUDGET_DATA_DIR")
    return Path(data_dir) / "config" if data_dir else DEFAULT_CONFIG_DIR


def preferences_file() -> Path:
    return config_dir() / PREFERENCES_FILENAME


def ensure_config_dir() -> None:
    """Ensure the config directory exists."""
    config_dir().mkdir(parents=True, exist_ok=True)


def load_preferences() -> Preferences:
    """Load stored preferences, falling back to defaults."""
    path = preferences_file()
    if not path.exists():
        return Preferences()

    try:
        with open(path, "r", encoding="utf-8") as f:
            return Preferences(**json.load(f))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError, TypeError) as exc:
        logger.warning("preferences_unreadable", path=str(path), error=str(exc))
        return Preferences()


def save_preferences(preferences: Preferences) -> Preferences:
    """Persist preferences, stamping the update time."""
    ensure_config_dir()
    stored = preferences.model_copy(update={"updated_at": datetime.utcnow()})
    with open(preferences_file(), "w", encoding="utf-8") as f:
        json.dump(stored.model_dump(mode="json"), f, indent=2, default=str)
    logger.info("preferences_saved", currency=stored.currency)
    return stored
