"""Configuration accessors for the CLI.

Centralizes reading settings from environment variables so command
implementations never touch ``os.environ`` directly.

Environment variables:
    MSGVIEW_START_DIR: Folder for the first file picker (default: working dir)
    MSGVIEW_ENCODING: Text encoding of .msg files (default: utf-8)
    MSGVIEW_LOG_LEVEL: Log panel level (debug/info/warning/error; default: hidden)
"""

import os
from pathlib import Path

DEFAULT_ENCODING = "utf-8"
LOG_LEVELS = ("debug", "info", "warning", "error")


def get_start_dir() -> Path | None:
    """Get the configured start folder, if set."""
    value = os.getenv("MSGVIEW_START_DIR")
    if not value:
        return None
    return Path(value).expanduser()


def get_encoding() -> str:
    """Get the configured text encoding for .msg files."""
    return os.getenv("MSGVIEW_ENCODING") or DEFAULT_ENCODING


def get_log_level() -> str | None:
    """Get the configured log panel level.

    Returns:
        Lowercase level name, or None if unset or not a known level
    """
    value = os.getenv("MSGVIEW_LOG_LEVEL")
    if not value or value.lower() not in LOG_LEVELS:
        return None
    return value.lower()
