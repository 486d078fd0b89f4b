"""Structural JPEG check on raw byte buffers.

WHY: The assembler must never append something that a downstream player
cannot split back into frames. Players split an MJPEG stream on the SOI
and EOI markers, so a frame is only usable if it starts and ends with them.

HOW: Compare the first two and last two bytes against the marker
constants. Nothing between the boundaries is parsed here; header
decoding happens in the scanner.

RULES:
- Fewer than 4 bytes → invalid (no room for both markers)
- Must start with FF D8 and end with FF D9
- Never raises for any bytes-like input
"""

from __future__ import annotations

from mjpeg_creator.config import EOI_MARKER, SOI_MARKER

_MIN_FRAME_SIZE = len(SOI_MARKER) + len(EOI_MARKER)


def is_valid_jpeg(data: bytes) -> bool:
    """Return True if ``data`` is bounded by the SOI and EOI markers."""
    if len(data) < _MIN_FRAME_SIZE:
        return False
    return bytes(data[:2]) == SOI_MARKER and bytes(data[-2:]) == EOI_MARKER
