"""Shared test fixtures for the mjpeg_creator test suite.

WHY: Most test modules need small, hand-built JPEG byte buffers with a
known frame header. Building them in one place keeps the header layout
(height before width, fixed offsets from the FF C0 marker) consistent
across every test.

HOW: ``make_jpeg`` is a factory fixture producing SOI + APP0 + SOF0 +
filler + EOI buffers for a given size. The literal scenario buffers are
exposed as fixtures too.

RULES:
- Filler bytes never contain 0xFF, so no stray markers appear inside frames
- SOF0 layout: FF C0, 00 00 00 08, height (2 bytes BE), width (2 bytes BE)
"""

import struct

import pytest

SOI = b"\xff\xd8"
EOI = b"\xff\xd9"
APP0 = b"\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00"


def build_jpeg(width, height, payload=b"\x11\x22\x33\x44"):
    """Assemble a minimal marker-structured JPEG buffer."""
    sof0 = b"\xff\xc0\x00\x00\x00\x08" + struct.pack(">HH", height, width) + b"\x03\x01\x22\x00"
    return SOI + APP0 + sof0 + payload + EOI


@pytest.fixture
def make_jpeg():
    """Factory: make_jpeg(width, height, payload=...) -> bytes."""
    return build_jpeg


@pytest.fixture
def scenario_frame():
    """14-byte frame from the reference scenario: 4x4."""
    return bytes([0xFF, 0xD8, 0xFF, 0xC0, 0, 0, 0, 8, 0, 4, 0, 4, 0xFF, 0xD9])


@pytest.fixture
def scenario_wide_frame():
    """Same as scenario_frame but with the width field set to 6."""
    return bytes([0xFF, 0xD8, 0xFF, 0xC0, 0, 0, 0, 8, 0, 4, 0, 6, 0xFF, 0xD9])


@pytest.fixture
def frame_dir(tmp_path, make_jpeg):
    """Directory with three 640x480 frames, a 320x240 frame and a text file."""
    frames = tmp_path / "frames"
    frames.mkdir()
    (frames / "frame_0001.jpg").write_bytes(make_jpeg(640, 480, b"\x01"))
    (frames / "frame_0002.jpg").write_bytes(make_jpeg(640, 480, b"\x02"))
    (frames / "frame_0003.jpeg").write_bytes(make_jpeg(320, 240, b"\x03"))
    (frames / "frame_0004.JPG").write_bytes(make_jpeg(640, 480, b"\x04"))
    (frames / "notes.txt").write_text("not a frame", encoding="utf-8")
    return frames
