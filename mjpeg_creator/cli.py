"""Command-line interface for MJPEG Creator.

WHY: The usual job is "turn this folder of JPEG frames into one MJPEG
file": a single command with two paths. A second command inspects the
result without needing an external video tool.

HOW: main() parses ``<input_directory> <output_file>``, enumerates the
frames with sources.collect_frame_files(), feeds each buffer to a
StreamAssembler inside a ``with`` block, and prints the BatchSummary.
analyze_main() parses ``<container>`` and prints a ContainerReport.
Status lines go to stderr; ``--json`` output goes to stdout.

RULES:
- Exit 0 on success; 1 on a missing/non-directory input, no frames found,
  output open/write failure or unreadable frame; 2 on bad arguments (argparse)
- Per-frame rejections are reported and the batch continues
- The output file is not created when there are no frames to process
- Status output goes to stderr (not stdout) so --json can be piped
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from mjpeg_creator import __version__
from mjpeg_creator.analysis import analyze_container
from mjpeg_creator.config import (
    DUMP_BYTES,
    LOG_LEVEL,
    resolve_dump_bytes,
    resolve_log_level,
)
from mjpeg_creator.core.assembler import StreamAssembler
from mjpeg_creator.core.models import InputDirectoryError, MjpegError
from mjpeg_creator.reports import BatchSummary, ContainerReport
from mjpeg_creator.sources import collect_frame_files, iter_frames

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr, flushed immediately."""
    print(msg, file=sys.stderr, flush=True)


def _setup_logging(verbose: bool) -> None:
    """Configure root logging from --verbose or MJPEG_LOG_LEVEL.

    RULES:
    - --verbose forces DEBUG
    - Otherwise MJPEG_LOG_LEVEL (default WARNING); unknown names raise ValueError
    - Log records go to stderr
    """
    level = logging.DEBUG if verbose else resolve_log_level(LOG_LEVEL)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stderr,
    )


def _fail(message: str) -> None:
    print("Error: {}".format(message), file=sys.stderr)
    sys.exit(1)


# ---------------------------------------------------------------------------
# create: JPEG directory → MJPEG file
# ---------------------------------------------------------------------------


def _run_create(args: argparse.Namespace) -> BatchSummary:
    """Assemble every frame in the input directory into the output file.

    WHY: This is the whole batch (enumeration, reading, assembly and
    summary), kept separate from argument parsing so tests can drive it
    with a Namespace.

    HOW: Enumerates first so that an empty input never creates an output
    file, then opens the assembler in a ``with`` block so the file is
    closed even when a read or write error aborts the run.

    RULES:
    - No matching files → InputDirectoryError
    - Rejected frames are reported with their file name and reason
    - OutputSinkError / FrameReadError propagate (fatal)
    """
    frame_files = collect_frame_files(args.input_directory)
    if not frame_files:
        raise InputDirectoryError(
            "No JPEG files found in directory: {}".format(args.input_directory)
        )
    _status("Found {} frame file(s) in {}".format(len(frame_files), args.input_directory))

    with StreamAssembler(args.output_file) as assembler:
        for path, data in iter_frames(frame_files):
            _status("Processing: {}".format(path.name))
            result = assembler.add_frame(data)
            if not result.accepted:
                _status("  Failed to add frame: {} ({})".format(path.name, result.reason.value))
        summary = assembler.summary()

    return summary


def _print_batch_summary(summary: BatchSummary) -> None:
    _status("")
    _status("MJPEG creation complete:")
    _status("- Processed frames: {}/{}".format(summary.frames_accepted, summary.frames_submitted))
    _status("- Resolution: {}".format(summary.resolution))
    for reason, count in sorted(summary.rejections.items()):
        _status("- Rejected ({}): {}".format(reason, count))
    _status("- Output: {} ({} bytes)".format(summary.output_path, summary.bytes_written))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the create command.

    RULES:
    - Positional: input_directory, output_file (both required)
    - Optional: --json, --verbose, --version
    """
    parser = argparse.ArgumentParser(
        prog="mjpeg-creator",
        description="Concatenate a directory of baseline JPEG frames into a "
                    "single MJPEG stream. All frames must share one resolution. "
                    "The reported resolution is decoded from fixed frame-header "
                    "offsets one byte past the standard SOF0 layout, so on real "
                    "JPEG files it is not the true pixel size.",
    )
    parser.add_argument(
        "input_directory",
        help="Directory containing .jpg/.jpeg frames (processed in sorted name order).",
    )
    parser.add_argument(
        "output_file",
        help="Path of the MJPEG file to create (overwritten if it exists).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the batch summary as JSON on stdout.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``mjpeg-creator`` and ``python -m mjpeg_creator``.

    argv=None means use sys.argv; explicit argv is for testing.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        _setup_logging(args.verbose)
        summary = _run_create(args)
    except (MjpegError, ValueError) as e:
        _fail(str(e))
        return

    _print_batch_summary(summary)
    if args.json:
        print(summary.model_dump_json(indent=2))


# ---------------------------------------------------------------------------
# analyze: MJPEG file → report
# ---------------------------------------------------------------------------


def _print_container_report(report: ContainerReport) -> None:
    _status("Container: {} ({} bytes)".format(report.path, report.total_bytes))
    _status("- Frames: {}".format(report.frame_count))
    if report.dimensions:
        _status("- Resolution(s): {}".format(", ".join(report.dimensions)))
    else:
        _status("- Resolution(s): none decodable")
    if not report.is_consistent:
        _status("- Warning: frames do not share a single resolution")
    if report.binary_dump:
        _status("")
        _status("Binary analysis:")
        _status(report.binary_dump)


def build_analyze_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the analyze command."""
    parser = argparse.ArgumentParser(
        prog="mjpeg-analyze",
        description="Inspect an MJPEG stream: count frames, list resolutions, "
                    "and dump the leading bytes in binary. Resolutions use the same "
                    "header offsets as mjpeg-creator and are not the true pixel "
                    "size of standard JPEG files.",
    )
    parser.add_argument("container", help="MJPEG file to analyze.")
    parser.add_argument(
        "--bytes",
        type=int,
        default=None,
        dest="dump_bytes",
        help="Number of leading bytes to dump (default: MJPEG_DUMP_BYTES or 128).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the container report as JSON on stdout.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def analyze_main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``mjpeg-analyze`` and ``python -m mjpeg_creator --analyze``."""
    parser = build_analyze_parser()
    args = parser.parse_args(argv)

    try:
        _setup_logging(args.verbose)
        dump_bytes = args.dump_bytes
        if dump_bytes is None:
            dump_bytes = resolve_dump_bytes(DUMP_BYTES)
        report = analyze_container(args.container, dump_bytes)
    except (MjpegError, ValueError) as e:
        _fail(str(e))
        return

    logger.debug("Analyzed %s: %d frame(s)", report.path, report.frame_count)
    _print_container_report(report)
    if args.json:
        print(report.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
