# service/settings.py
# Centralized configuration for the extractor (CLI and API).

from __future__ import annotations

import json
import os
from functools import lru_cache
from typing import List, Tuple

from css_skeleton.ignore_patterns import DEFAULT_IGNORE_CLASS_PATTERNS, IgnorePatterns


def _env_list(name: str, default: Tuple[str, ...]) -> List[str]:
    """
    Read a list setting. Accepts a JSON array ('["br_*", "u-*"]') or a
    comma-separated string ('br_*, u-*'). Unset means `default`.
    """
    raw = os.getenv(name)
    if raw is None:
        return list(default)
    raw = raw.strip()
    if raw.startswith("["):
        try:
            value = json.loads(raw)
        except json.JSONDecodeError as e:
            raise RuntimeError(f"{name} is not a valid JSON array: {e}") from e
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise RuntimeError(f"{name} must be a JSON array of strings")
        return [v.strip() for v in value if v.strip()]
    return [v.strip() for v in raw.split(",") if v.strip()]


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    All configuration is read from environment variables when the object is built.
    """

    def __init__(self) -> None:
        # --- Selector derivation ---
        self.IGNORE_CLASS_PATTERNS: List[str] = _env_list("IGNORE_CLASS_PATTERNS", DEFAULT_IGNORE_CLASS_PATTERNS)
        self.EMIT_INTERMEDIATE: bool = _env_bool("EMIT_INTERMEDIATE", True)

        # --- HTML discovery ---
        self.HTML_MAX_FILES: int = _env_int("HTML_MAX_FILES", 100)
        self.HTML_EXCLUDE_DIRS: List[str] = _env_list("HTML_EXCLUDE_DIRS", ("node_modules",))
        self.HTML_PRIORITY_FILES: List[str] = _env_list(
            "HTML_PRIORITY_FILES", ("index.html", "under.html", "interview.html")
        )

        # --- Misc ---
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

        self._ignore: IgnorePatterns | None = None

    def ignore_patterns(self) -> IgnorePatterns:
        if self._ignore is None:
            self._ignore = IgnorePatterns(self.IGNORE_CLASS_PATTERNS)
        return self._ignore


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Cached accessor for settings; the environment is read once per process.
    Usage:
        from service.settings import get_settings
        ignore = get_settings().ignore_patterns()
    """
    return Settings()
