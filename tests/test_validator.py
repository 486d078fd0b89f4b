"""Unit tests for the structural JPEG check.

WHY: The boundary check is the first gate for every frame. A false
positive lets an unsplittable buffer into the stream; a false negative
drops good frames.

HOW: Tests cover the length floor, each boundary marker on its own, and
buffers that are boundary-correct but otherwise junk.
"""

import pytest

from mjpeg_creator.core.validator import is_valid_jpeg


class TestLengthFloor:
    """Buffers shorter than four bytes are never valid."""

    @pytest.mark.parametrize("data", [b"", b"\xff", b"\xff\xd8", b"\xff\xd8\xd9"])
    def test_short_buffers_rejected(self, data):
        assert is_valid_jpeg(data) is False

    def test_four_byte_minimum_accepted(self):
        assert is_valid_jpeg(b"\xff\xd8\xff\xd9") is True


class TestBoundaryMarkers:
    """SOI must open and EOI must close the buffer."""

    def test_missing_soi(self):
        assert is_valid_jpeg(b"\x00\xd8\x01\x02\xff\xd9") is False

    def test_missing_eoi(self):
        assert is_valid_jpeg(b"\xff\xd8\x01\x02\xff\xd8") is False

    def test_markers_swapped(self):
        assert is_valid_jpeg(b"\xff\xd9\x01\x02\xff\xd8") is False

    def test_trailing_garbage_after_eoi(self, make_jpeg):
        assert is_valid_jpeg(make_jpeg(8, 8) + b"\x00") is False

    def test_well_formed_frame(self, make_jpeg):
        assert is_valid_jpeg(make_jpeg(640, 480)) is True

    def test_interior_not_inspected(self):
        """Only the boundaries matter; the middle can be anything."""
        assert is_valid_jpeg(b"\xff\xd8" + b"\x00" * 50 + b"\xff\xd9") is True

    def test_accepts_bytearray(self):
        assert is_valid_jpeg(bytearray(b"\xff\xd8\x10\xff\xd9")) is True
