"""MJPEG stream assembly with cross-frame dimension enforcement.

WHY: An MJPEG file is nothing but JPEG codec streams laid end to end;
there is no container header or frame index. Players find frames by
scanning for SOI/EOI markers and assume a single resolution, so the only
safe way to build the file is to vet every frame before its bytes land
in the output.

HOW: StreamAssembler owns the output file and the baseline Dimensions.
add_frame() runs the structural check, decodes the frame header, compares
it against the baseline (setting the baseline on the first frame that
gets that far), and appends the untouched buffer on success.

RULES:
- Check order: structure → header marker → dimensions → write
- The baseline is set exactly once, by the first frame past header decoding
- Rejected frames write nothing and leave the baseline unchanged
- Rejections are returned, never raised; only OSError on the sink is fatal
- The sink is closed exactly once; close() is idempotent
"""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Optional, Union

from mjpeg_creator.core.models import (
    Dimensions,
    FrameResult,
    OutputSinkError,
    RejectReason,
)
from mjpeg_creator.core.scanner import read_frame_dimensions
from mjpeg_creator.core.validator import is_valid_jpeg
from mjpeg_creator.reports import BatchSummary

logger = logging.getLogger(__name__)


class _FrameRejected(Exception):
    """Internal signal carrying a rejection up to the add_frame boundary."""

    def __init__(self, reason: RejectReason, dimensions: Optional[Dimensions] = None):
        super().__init__(reason.value)
        self.reason = reason
        self.dimensions = dimensions


class StreamAssembler:
    """Append-only MJPEG writer that enforces a single frame resolution.

    Usage::

        with StreamAssembler("out.mjpeg") as assembler:
            for data in frames:
                result = assembler.add_frame(data)

    The output file is created (or truncated) on construction and closed
    when the ``with`` block exits, when close() is called, or when the
    object is garbage collected, whichever happens first.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._dimensions: Optional[Dimensions] = None
        self._closed = False
        self.frames_submitted = 0
        self.frames_accepted = 0
        self.bytes_written = 0
        self.rejections: Counter = Counter()
        try:
            self._sink = open(self.path, "wb")
        except OSError as e:
            self._closed = True
            raise OutputSinkError(
                "Could not open output file: {} ({})".format(self.path, e)
            ) from e
        logger.debug("Opened MJPEG output %s", self.path)

    @classmethod
    def open(cls, path: Union[str, Path]) -> "StreamAssembler":
        """Create an assembler writing to ``path``; same as the constructor."""
        return cls(path)

    # ------------------------------------------------------------------
    # Frame handling
    # ------------------------------------------------------------------

    def add_frame(self, data: Union[bytes, bytearray, memoryview]) -> FrameResult:
        """Validate one JPEG buffer and append it to the output on success.

        WHY: Per-frame problems (a truncated file, a thumbnail mixed into
        the sequence) must not abort a batch, but they must be reported
        precisely enough for the caller to tell them apart.

        HOW: The checks raise an internal _FrameRejected signal that is
        converted into a FrameResult right here, so nothing about a
        rejection escapes this method as an exception.

        RULES:
        - Boundary markers missing → INVALID_STRUCTURE
        - No readable SOF0 header → DIMENSION_MARKER_MISSING
        - Header size differs from the baseline → DIMENSION_MISMATCH
        - Accepted frames are written byte-for-byte, markers included
        - Write failures raise OutputSinkError (fatal to the batch)

        Args:
            data: One complete candidate JPEG codec stream (any bytes-like object).

        Returns:
            FrameResult describing acceptance or the single rejection reason.
        """
        if self._closed:
            raise OutputSinkError("Output file is closed: {}".format(self.path))

        # memoryview and other buffers lack find(); scan and write plain bytes.
        data = bytes(data)
        self.frames_submitted += 1
        try:
            dimensions = self._check_frame(data)
        except _FrameRejected as rejected:
            self.rejections[rejected.reason.value] += 1
            logger.warning(
                "Rejected frame %d (%d bytes): %s",
                self.frames_submitted, len(data), rejected.reason.value,
            )
            return FrameResult(
                accepted=False,
                reason=rejected.reason,
                dimensions=rejected.dimensions,
            )

        self._write(data)
        self.frames_accepted += 1
        logger.debug(
            "Accepted frame %d (%d bytes, %s)",
            self.frames_submitted, len(data), dimensions,
        )
        return FrameResult(accepted=True, dimensions=dimensions)

    def _check_frame(self, data: bytes) -> Dimensions:
        if not is_valid_jpeg(data):
            raise _FrameRejected(RejectReason.INVALID_STRUCTURE)

        frame_dimensions = read_frame_dimensions(data)
        if frame_dimensions is None:
            raise _FrameRejected(RejectReason.DIMENSION_MARKER_MISSING)

        if self._dimensions is None:
            self._dimensions = frame_dimensions
            logger.info("Established baseline resolution %s", frame_dimensions)
        elif frame_dimensions != self._dimensions:
            raise _FrameRejected(RejectReason.DIMENSION_MISMATCH, frame_dimensions)

        return frame_dimensions

    def _write(self, data: bytes) -> None:
        try:
            self._sink.write(data)
        except OSError as e:
            raise OutputSinkError(
                "Could not write to output file: {} ({})".format(self.path, e)
            ) from e
        self.bytes_written += len(data)

    # ------------------------------------------------------------------
    # State queries
    # ------------------------------------------------------------------

    @property
    def dimensions(self) -> Optional[Dimensions]:
        """The established baseline, or None if no frame got that far."""
        return self._dimensions

    @property
    def closed(self) -> bool:
        return self._closed

    def summary(self) -> BatchSummary:
        """Snapshot the batch counters and baseline as a BatchSummary."""
        return BatchSummary(
            output_path=str(self.path),
            frames_submitted=self.frames_submitted,
            frames_accepted=self.frames_accepted,
            bytes_written=self.bytes_written,
            width=self._dimensions.width if self._dimensions else None,
            height=self._dimensions.height if self._dimensions else None,
            rejections=dict(self.rejections),
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Flush and close the output file. Calling it again does nothing."""
        if self._closed:
            return
        self._closed = True
        try:
            self._sink.close()
        except OSError as e:
            raise OutputSinkError(
                "Could not finalize output file: {} ({})".format(self.path, e)
            ) from e
        logger.debug("Closed MJPEG output %s", self.path)

    def __enter__(self) -> "StreamAssembler":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        # Interpreter shutdown or a failed __init__ may leave attributes unset.
        if getattr(self, "_closed", True) or not hasattr(self, "_sink"):
            return
        try:
            self.close()
        except OutputSinkError:
            logger.warning("Could not finalize output file %s during cleanup", self.path)
