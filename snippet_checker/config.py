from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from .exceptions import ConfigError

logger = logging.getLogger("snippet_checker")

DEFAULT_BOOK_DIR = "../src"
DEFAULT_CRATES_DIR = "crates"
DEFAULT_LANGUAGE = "rust"
DEFAULT_INDENT_WIDTH = 4
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(slots=True)
class CheckerConfig:
    """Runtime configuration for a snippet check run."""

    code_dir: Path
    book_dir: Path = Path(DEFAULT_BOOK_DIR)
    crates_dir: str = DEFAULT_CRATES_DIR
    language: str = DEFAULT_LANGUAGE
    indent_width: int = DEFAULT_INDENT_WIDTH
    color: bool = True
    show_progress: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def source_root(self) -> Path:
        return self.code_dir / self.crates_dir

    @classmethod
    def from_env(cls, **overrides: Any) -> "CheckerConfig":
        """Build the configuration from the environment.

        Keyword overrides win over environment values; ``None`` overrides are
        ignored so unset CLI flags fall through.
        """

        def _int_env(name: str, default: int) -> int:
            raw = os.getenv(name)
            if not raw:
                return default
            try:
                return int(raw)
            except ValueError:
                logger.warning("Invalid integer for %s: %s", name, raw)
                return default

        overrides = {key: value for key, value in overrides.items() if value is not None}

        code_dir = overrides.pop("code_dir", None) or os.getenv("CODE_DIR")
        if not code_dir:
            raise ConfigError("CODE_DIR environment variable is not set")

        config = cls(
            code_dir=Path(code_dir),
            book_dir=Path(os.getenv("SNIPPET_BOOK_DIR", DEFAULT_BOOK_DIR)),
            crates_dir=os.getenv("SNIPPET_CRATES_DIR", DEFAULT_CRATES_DIR),
            language=os.getenv("SNIPPET_LANGUAGE", DEFAULT_LANGUAGE),
            indent_width=_int_env("SNIPPET_INDENT_WIDTH", DEFAULT_INDENT_WIDTH),
            color=not os.getenv("NO_COLOR"),
            log_level=os.getenv("SNIPPET_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )
        if "book_dir" in overrides:
            overrides["book_dir"] = Path(overrides["book_dir"])
        config = replace(config, **overrides)

        if config.indent_width <= 0:
            raise ConfigError(f"Indentation width must be positive, got {config.indent_width}")
        return config


__all__ = ["CheckerConfig"]
