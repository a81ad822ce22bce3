"""
Owner roster configuration.

Defaults mirror the layout the extractor has always used: read ``input.html``
from the working directory, write ``owners/owner_data.json``. Every value can
be overridden through the environment (or a ``.env`` file).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_INPUT_PATH = Path("input.html")
DEFAULT_OUTPUT_DIR = Path("owners")
DEFAULT_OUTPUT_FILE = "owner_data.json"
DEFAULT_LOG_LEVEL = "INFO"

# Key used under owners_by_date for the snapshot built from the owner section
CURRENT_SNAPSHOT_KEY = "current"
UNKNOWN_PROPERTY_ID = "unknown_id"


@dataclass(frozen=True, slots=True)
class Settings:
    input_path: Path
    output_dir: Path
    output_file: str
    log_level: str

    @property
    def output_path(self) -> Path:
        return self.output_dir / self.output_file


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return settings resolved from env (env override wins over defaults)."""
    load_dotenv()
    return Settings(
        input_path=Path(os.getenv("OWNER_ROSTER_INPUT", str(DEFAULT_INPUT_PATH))).expanduser(),
        output_dir=Path(os.getenv("OWNER_ROSTER_OUTPUT_DIR", str(DEFAULT_OUTPUT_DIR))).expanduser(),
        output_file=os.getenv("OWNER_ROSTER_OUTPUT_FILE", DEFAULT_OUTPUT_FILE),
        log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )
