"""Configuration loaded from environment variables."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env


def _log_level(raw: str, default: str = "INFO") -> str:
    """Level name from env; unknown names (e.g. VERBOSE) fall back to default."""
    level = (raw or "").strip().upper()
    return level if isinstance(logging.getLevelName(level), int) else default


# Logging
LOG_LEVEL: str = _log_level(os.getenv("LOG_LEVEL", "INFO"))

# Skill breakdown: how many non-matching skills to list before "+N more"
OTHER_SKILLS_DISPLAY_LIMIT: int = int(os.getenv("OTHER_SKILLS_DISPLAY_LIMIT", "5"))
