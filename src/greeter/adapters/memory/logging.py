"""Logging port that never starts lib_log_rich."""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Ignore ``config``."""


__all__ = ["init_logging_in_memory"]
