"""Frame-header marker scan and dimension decoding.

WHY: Every frame appended to one MJPEG stream must have the same pixel
size. The size lives in the baseline frame header that follows the SOF0
marker (FF C0), somewhere after the SOI marker and any APPn/DQT/DHT
segments, so it has to be located by scanning.

HOW: A bounded linear search finds the first FF C0 whose position leaves
enough trailing bytes to read the whole header. Two big-endian unsigned
16-bit fields are then unpacked at fixed offsets from the marker.

RULES:
- The first qualifying FF C0 wins; later occurrences are ignored
- A marker with fewer than 8 bytes after it counts as "not found"
- Height precedes width in byte order (height at +6, width at +8)
- Pure functions: no I/O, no state, never read past the buffer end

CAVEAT: A standard baseline SOF0 segment (FF C0, length, precision, Y, X)
stores height at marker+5 and width at marker+7, one byte earlier than
read here. On real JPEG files the decoded Dimensions are therefore not
the true pixel size: each field straddles two header bytes. Frames of
equal size still compare equal, but frames whose heights differ only in
the high byte (or widths only in the low byte) compare equal too.
"""

from __future__ import annotations

import struct
from typing import Optional

from mjpeg_creator.config import SOF0_MARKER
from mjpeg_creator.core.models import Dimensions

# Bytes that must follow the two marker bytes for the header to be readable.
HEADER_TRAILING_BYTES = 8

# Offsets of the big-endian height and width fields, relative to the marker.
HEIGHT_OFFSET = 6
WIDTH_OFFSET = 8

_FIELD = struct.Struct(">H")


def find_frame_header(data: bytes, start: int = 0) -> Optional[int]:
    """Return the offset of the first readable SOF0 marker, or None.

    WHY: Reading the header fields of a marker that sits too close to the
    end of a truncated or malformed buffer would run past the data.

    HOW: ``bytes.find`` with an explicit end bound. The bound is the last
    position where the marker can *end* while still leaving
    HEADER_TRAILING_BYTES behind it, clamped at zero so that a short
    buffer never turns into a negative (end-relative) index.

    Args:
        data: Complete candidate JPEG codec stream.
        start: Offset to start searching from.

    Returns:
        Offset of the FF byte of the marker, or None if not found.
    """
    end = max(0, len(data) - HEADER_TRAILING_BYTES)
    offset = data.find(SOF0_MARKER, start, end)
    if offset < 0:
        return None
    return offset


def read_frame_dimensions(data: bytes) -> Optional[Dimensions]:
    """Decode the frame dimensions from the first SOF0 header in ``data``.

    Returns None when no readable SOF0 marker exists.
    """
    offset = find_frame_header(data)
    if offset is None:
        return None

    (height,) = _FIELD.unpack_from(data, offset + HEIGHT_OFFSET)
    (width,) = _FIELD.unpack_from(data, offset + WIDTH_OFFSET)
    return Dimensions(width=width, height=height)
