"""Runtime configuration.

Tunables are read from environment variables once at import. Malformed
values fall back to the defaults so a stray variable never breaks recovery.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from seedshard.phrase import WORD_COUNTS

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_word_count(name: str, default: int) -> int:
    value = _load_int(name, default)
    return value if value in WORD_COUNTS else default


def _load_level(name: str, default: str) -> str:
    value = os.environ.get(name, "").strip().upper()
    return value if value in _LOG_LEVELS else default


def _load_path(name: str) -> Optional[Path]:
    value = os.environ.get(name)
    if not value:
        return None
    return Path(value).expanduser()


@dataclass(frozen=True)
class SharePolicy:
    """Holds the tunables shared by the CLI and the audit log."""

    default_words: int = 24
    log_level: str = "WARNING"
    audit_dir: Optional[Path] = None


def load_policy() -> SharePolicy:
    """Load the policy considering environment overrides."""

    return SharePolicy(
        default_words=_load_word_count("SEEDSHARD_DEFAULT_WORDS", 24),
        log_level=_load_level("SEEDSHARD_LOG_LEVEL", "WARNING"),
        audit_dir=_load_path("SEEDSHARD_AUDIT_DIR"),
    )


policy = load_policy()


__all__ = ["SharePolicy", "policy", "load_policy"]
