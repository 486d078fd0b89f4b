"""Read-only inspection of finished MJPEG containers.

WHY: An MJPEG file has no index, so the only way to check what was
written is to do what a player does: scan for SOI/EOI markers and cut
the stream into frames. A short binary dump of the file head is the
quickest way to eyeball the first frame's marker layout.

HOW: iter_frame_spans() walks the buffer with bytes.find, pairing each
SOI with the next EOI. split_frames() slices those spans out.
binary_dump() renders bytes in ``xxd -b`` layout. analyze_container()
combines all three with the core scanner into a ContainerReport.

RULES:
- A frame is SOI through the next EOI, inclusive
- Bytes outside any SOI..EOI span are skipped
- A trailing SOI without an EOI is not a frame
- Nothing here writes to disk
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Tuple, Union

from mjpeg_creator.config import DEFAULT_DUMP_BYTES, EOI_MARKER, SOI_MARKER
from mjpeg_creator.core.models import FrameReadError
from mjpeg_creator.core.scanner import read_frame_dimensions
from mjpeg_creator.reports import ContainerReport, FrameInfo

# Bytes per dump line, as printed by ``xxd -b``.
DUMP_BYTES_PER_LINE = 6


def iter_frame_spans(data: bytes) -> Iterator[Tuple[int, int]]:
    """Yield ``(start, end)`` offsets of each SOI..EOI frame in ``data``.

    ``end`` is exclusive, so ``data[start:end]`` is the whole frame.
    """
    position = 0
    while True:
        start = data.find(SOI_MARKER, position)
        if start < 0:
            return
        eoi = data.find(EOI_MARKER, start + len(SOI_MARKER))
        if eoi < 0:
            return
        end = eoi + len(EOI_MARKER)
        yield start, end
        position = end


def split_frames(data: bytes) -> List[bytes]:
    """Cut a concatenated MJPEG stream back into its JPEG frames."""
    return [data[start:end] for start, end in iter_frame_spans(data)]


def binary_dump(data: bytes, length: int = DEFAULT_DUMP_BYTES) -> str:
    """Render the first ``length`` bytes in ``xxd -b`` layout.

    Each line holds an 8-digit hex offset, up to six bytes as 8-bit
    binary groups, and the printable-ASCII rendering of those bytes
    (anything outside 0x20–0x7e shown as ``.``). A negative ``length``
    dumps everything.
    """
    head = data if length < 0 else data[:length]
    width = DUMP_BYTES_PER_LINE * 9 - 1
    lines = []
    for offset in range(0, len(head), DUMP_BYTES_PER_LINE):
        chunk = head[offset:offset + DUMP_BYTES_PER_LINE]
        bits = " ".join("{:08b}".format(byte) for byte in chunk)
        text = "".join(chr(byte) if 0x20 <= byte <= 0x7E else "." for byte in chunk)
        lines.append("{:08x}: {}  {}".format(offset, bits.ljust(width), text))
    return "\n".join(lines)


def analyze_container(
    path: Union[str, Path],
    dump_bytes: int = DEFAULT_DUMP_BYTES,
) -> ContainerReport:
    """Describe the frames inside an MJPEG container file.

    WHY: After a batch, users want to confirm the frame count and that a
    single resolution made it into the file, without reaching for an
    external video tool.

    HOW: Read the file, walk its SOI..EOI spans, decode each frame's
    header with the same scanner the assembler uses, and collect the
    distinct resolutions in order of first appearance.

    RULES:
    - Frames without a readable SOF0 header are listed with no width/height
    - ``dimensions`` only lists decodable frames
    - Raises FrameReadError if the file cannot be read

    Args:
        path: Container file to analyze.
        dump_bytes: How many leading bytes to include in the binary dump.

    Returns:
        ContainerReport describing the container.
    """
    container = Path(path)
    try:
        data = container.read_bytes()
    except OSError as e:
        raise FrameReadError("Could not read file: {} ({})".format(container, e)) from e

    frames: List[FrameInfo] = []
    seen: List[str] = []
    for index, (start, end) in enumerate(iter_frame_spans(data)):
        dims = read_frame_dimensions(data[start:end])
        frames.append(FrameInfo(
            index=index,
            offset=start,
            size=end - start,
            width=dims.width if dims else None,
            height=dims.height if dims else None,
        ))
        if dims is not None and str(dims) not in seen:
            seen.append(str(dims))

    return ContainerReport(
        path=str(container),
        total_bytes=len(data),
        frame_count=len(frames),
        frames=frames,
        dimensions=seen,
        binary_dump=binary_dump(data, dump_bytes),
    )
