"""
Command-line frame counter.

    mp3-frames song.mp3 other.mp3
    mp3-frames --verbose song.mp3
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from mp3.counter import inspect_mp3
from mp3.errors import FrameCounterError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mp3-frames",
        description="Count MPEG-1 Layer III audio frames in MP3 files",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="MP3 files to scan",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Also print the audio start offset, raw frame count and VBR flag",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Print `path<TAB>frame_count` for each file.

    Returns 1 if any file could not be read or counted, else 0.
    """
    args = build_parser().parse_args(argv)
    failed = False

    for path in args.paths:
        try:
            report = inspect_mp3(path.read_bytes())
        except (OSError, FrameCounterError) as exc:
            print(f"{path}\terror: {exc}")
            failed = True
            continue

        if args.verbose:
            print(
                f"{path}\t{report.frame_count}"
                f"\tstart={report.audio_start_offset}"
                f"\tscanned={report.scanned_frame_count}"
                f"\tvbr={'yes' if report.has_vbr_header else 'no'}"
            )
        else:
            print(f"{path}\t{report.frame_count}")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
