"""Core validation, scanning and assembly modules.

WHY: The core package holds the binary format reasoning of the tool:
deciding whether bytes are a usable JPEG frame, finding its frame header,
and appending it to an MJPEG stream. Everything outside core is I/O and
reporting around it.

HOW: validator.py checks SOI/EOI boundaries, scanner.py finds the SOF0
header and decodes width/height, assembler.py ties both together with
the output file and the baseline resolution. models.py holds the shared
value and error types.

RULES:
- No argument parsing or directory walking here
- Scanner and validator are pure; only the assembler touches a file
"""

from mjpeg_creator.core.assembler import StreamAssembler
from mjpeg_creator.core.models import (
    Dimensions,
    FrameReadError,
    FrameResult,
    InputDirectoryError,
    MjpegError,
    OutputSinkError,
    RejectReason,
)
from mjpeg_creator.core.scanner import find_frame_header, read_frame_dimensions
from mjpeg_creator.core.validator import is_valid_jpeg

__all__ = [
    "Dimensions",
    "FrameReadError",
    "FrameResult",
    "InputDirectoryError",
    "MjpegError",
    "OutputSinkError",
    "RejectReason",
    "StreamAssembler",
    "find_frame_header",
    "is_valid_jpeg",
    "read_frame_dimensions",
]
