"""Input frame discovery and loading.

WHY: Frames usually arrive as a directory of numbered JPEG exports
(frame_0001.jpg, frame_0002.jpg, ...). The assembler only sees byte
buffers, so something has to find the files, put them in playback order,
and read them.

HOW: collect_frame_files() lists the directory, keeps regular files with
a JPEG extension, and sorts them by path. read_frame() reads one file
whole. iter_frames() chains the two for callers that just want buffers.

RULES:
- Extension match is case-insensitive (.jpg, .JPG, .jpeg)
- Ordering is plain lexicographic path order; zero-pad frame numbers
- Subdirectories are not descended into
- Missing or non-directory input raises InputDirectoryError
- Unreadable files raise FrameReadError
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from mjpeg_creator.config import FRAME_EXTENSIONS
from mjpeg_creator.core.models import FrameReadError, InputDirectoryError


def collect_frame_files(
    directory: Union[str, Path],
    extensions: Optional[Iterable[str]] = None,
) -> List[Path]:
    """List JPEG frame files in ``directory`` in playback order.

    WHY: Frame order in the output is the order the caller submits
    frames, so enumeration has to be deterministic across platforms
    (os.listdir order is not).

    HOW: Iterate the directory, filter regular files by lowercase suffix,
    and sort the resulting paths.

    RULES:
    - Raises InputDirectoryError if ``directory`` does not exist or is
      not a directory
    - Returns an empty list when no file matches; the caller decides
      whether that is an error

    Args:
        directory: Directory holding the frame files.
        extensions: Suffixes to accept (with dot). Defaults to FRAME_EXTENSIONS.

    Returns:
        Sorted list of matching file paths.
    """
    root = Path(directory)
    if not root.exists():
        raise InputDirectoryError("Input directory does not exist: {}".format(root))
    if not root.is_dir():
        raise InputDirectoryError("Input path is not a directory: {}".format(root))

    accepted = {ext.lower() for ext in (extensions or FRAME_EXTENSIONS)}
    return sorted(
        entry for entry in root.iterdir()
        if entry.is_file() and entry.suffix.lower() in accepted
    )


def read_frame(path: Union[str, Path]) -> bytes:
    """Read one frame file completely."""
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise FrameReadError("Could not read file: {} ({})".format(path, e)) from e


def iter_frames(paths: Iterable[Path]) -> Iterator[Tuple[Path, bytes]]:
    """Yield ``(path, data)`` pairs, reading each file lazily."""
    for path in paths:
        yield path, read_frame(path)
