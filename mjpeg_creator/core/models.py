"""Core value types and error classes for MJPEG assembly.

WHY: The validator, the scanner, and the assembler exchange a handful of
small values such as frame dimensions and rejection reasons.
Keeping them in one module gives every layer (core, CLI, reports) the
same vocabulary and lets tests assert on exact rejection reasons.

HOW: Dimensions and FrameResult are dataclasses, RejectReason is a
string Enum, and the fatal errors derive from a single MjpegError base
so the CLI can catch them in one place.

RULES:
- Dimensions is frozen; once established, a baseline never changes
- Every rejection maps to exactly one RejectReason member
- Rejections are returned as values; only I/O faults are raised
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Dimensions:
    """Pixel size of one frame, decoded from its frame header.

    Both fields are unsigned 16-bit values (0–65535), as stored in the
    header.
    """

    width: int
    height: int

    def __str__(self) -> str:
        return "{}x{}".format(self.width, self.height)


class RejectReason(str, Enum):
    """Why a frame was not appended to the output stream.

    Attributes:
        INVALID_STRUCTURE: Missing SOI prefix or EOI suffix, or too short.
        DIMENSION_MARKER_MISSING: Boundaries are fine but no SOF0 header
            with enough trailing bytes was found.
        DIMENSION_MISMATCH: Header decoded, but its size differs from the
            established baseline.
    """

    INVALID_STRUCTURE = "invalid_structure"
    DIMENSION_MARKER_MISSING = "dimension_marker_missing"
    DIMENSION_MISMATCH = "dimension_mismatch"


@dataclass
class FrameResult:
    """Outcome of a single ``StreamAssembler.add_frame`` call.

    Attributes:
        accepted: True when the frame was written to the output stream.
        reason: The rejection reason, or None when accepted.
        dimensions: Dimensions decoded from the frame header, when the
                    header could be decoded (also set on mismatches).
    """

    accepted: bool
    reason: Optional[RejectReason] = None
    dimensions: Optional[Dimensions] = None


class MjpegError(Exception):
    """Base class for fatal errors that abort a batch."""


class OutputSinkError(MjpegError):
    """The output stream could not be opened or written."""


class InputDirectoryError(MjpegError):
    """The input path is missing, not a directory, or holds no frames."""


class FrameReadError(MjpegError):
    """An input frame file could not be read."""
