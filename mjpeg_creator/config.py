"""Configuration constants, JPEG marker bytes, and .env loading.

WHY: Centralizes all configurable values so they are easy to find,
update, and override. Marker bytes, accepted file extensions, and CLI
defaults are plain data rather than logic, so the scanner, the
file enumeration, and the CLI all agree on the same values.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level bytes, sets, and strings. resolve_log_level() turns a
level name into a logging constant with a clear error when it is unknown.

RULES:
- Marker constants are two-byte ``bytes`` values, compared by slicing
- FRAME_EXTENSIONS are lowercase, with the leading dot
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

# Load .env from the project root (where the tool is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# JPEG marker bytes
# ---------------------------------------------------------------------------

SOI_MARKER = b"\xff\xd8"
"""Start-of-image marker; every JPEG codec stream begins with it."""

EOI_MARKER = b"\xff\xd9"
"""End-of-image marker; every JPEG codec stream ends with it."""

SOF0_MARKER = b"\xff\xc0"
"""Baseline start-of-frame marker introducing the frame header."""

# ---------------------------------------------------------------------------
# Input discovery
# ---------------------------------------------------------------------------

FRAME_EXTENSIONS: set[str] = {".jpg", ".jpeg"}
"""Still-image file extensions picked up from the input directory."""

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_DUMP_BYTES = 128
DUMP_BYTES = os.getenv("MJPEG_DUMP_BYTES", str(DEFAULT_DUMP_BYTES))
LOG_LEVEL = os.getenv("MJPEG_LOG_LEVEL", "WARNING")

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_log_level(name: str) -> int:
    """Map a level name such as ``"info"`` to its logging constant.

    RULES:
    - Case-insensitive, surrounding whitespace ignored
    - Raises ValueError for names outside the standard five levels
    """
    key = name.strip().upper()
    if key not in _LEVEL_NAMES:
        raise ValueError(
            "Unknown log level '{}'. Expected one of: {}".format(
                name, ", ".join(_LEVEL_NAMES)
            )
        )
    return getattr(logging, key)


def resolve_dump_bytes(value: str) -> int:
    """Parse the MJPEG_DUMP_BYTES setting into a byte count.

    RULES:
    - Must be an integer; negative means "dump everything"
    - Raises ValueError naming the variable for anything else
    """
    try:
        return int(value.strip())
    except ValueError:
        raise ValueError(
            "MJPEG_DUMP_BYTES must be an integer, got '{}'".format(value)
        ) from None
