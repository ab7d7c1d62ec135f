"""Runtime settings read from the environment (and an optional .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Repository root when installed in editable mode.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    log_level: str


def load_settings() -> Settings:
    load_dotenv(_PROJECT_ROOT / ".env")
    return Settings(
        data_dir=Path(os.getenv("STOREFRONT_DATA_DIR", str(_PROJECT_ROOT / "data"))),
        log_level=os.getenv("STOREFRONT_LOG_LEVEL", "WARNING").upper(),
    )
