"""MJPEG Creator: assemble JPEG still frames into a Motion-JPEG stream.

WHY: A directory of exported JPEG frames becomes playable video once the
frames are concatenated into an MJPEG file, but only if every frame is a
complete JPEG and all frames share one resolution. Players split the
stream on JPEG markers and cannot recover from either mistake.

HOW: Three stages: enumerate (sources), assemble (core), report
(reports). The core validates each buffer's SOI/EOI boundaries, decodes
the SOF0 frame header, enforces the baseline resolution, and appends the
raw bytes. The analysis module re-splits a finished container.

RULES:
- Output is a bare concatenation of accepted frames, byte-for-byte
- The first frame with a decodable header fixes the resolution
- Per-frame rejections never abort a batch; output I/O errors always do
"""

__version__ = "0.1.0"
