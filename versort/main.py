from __future__ import annotations

import argparse
import io
import logging
import os
import sys
from pathlib import Path
from typing import TextIO

from versort import __version__
from versort.config import load_config
from versort.engine import UnparsableLineError, sort_lines

logger = logging.getLogger(__name__)


def _existing_path(value: str) -> Path:
    p = Path(value)
    if not p.exists():
        raise argparse.ArgumentTypeError(f"path not found: {value}")
    return p


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def split_lines(data: str) -> list[str]:
    """Split input into lines with their terminators removed.

    A trailing newline is optional and does not produce an empty last line.
    """
    if not data:
        return []
    lines = data.split("\n")
    if data.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _utf8(stream: TextIO) -> TextIO:
    if isinstance(stream, io.TextIOWrapper):
        stream.reconfigure(encoding="utf-8", errors="surrogateescape")
    return stream


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="versort",
        description="Sort semantic-ish version tags read from stdin, one per line.",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        action="store_true",
        help="drop unparsable lines instead of failing",
    )
    parser.add_argument(
        "-c",
        "--count-is-char",
        action="store_true",
        help="treat a single trailing letter (e.g. 3.2a) as an ordinal counter",
    )
    parser.add_argument(
        "--config",
        type=_existing_path,
        default=None,
        help="YAML file with default options (ignore, count_is_char)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _write_output(lines: list[str], out: TextIO) -> bool:
    try:
        for line in lines:
            out.write(line + "\n")
        out.flush()
    except BrokenPipeError:
        if out is sys.stdout:
            # Python flushes stdout again at exit; point it at devnull so that cannot fail.
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
        return False
    return True


def main(
    argv: list[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)

    stdin = stdin or _utf8(sys.stdin)
    stdout = stdout or _utf8(sys.stdout)
    stderr = stderr or sys.stderr

    try:
        config = load_config(
            ignore=args.ignore, counter=args.count_is_char, config_path=args.config
        )
    except ValueError as e:
        parser.error(str(e))

    lines = split_lines(stdin.read())
    logger.debug("read %d lines", len(lines))

    try:
        result = sort_lines(lines, config)
    except UnparsableLineError as e:
        print(f"versort: {e}", file=stderr)
        return 1

    if result.dropped:
        logger.debug("dropped %d unparsable lines", len(result.dropped))

    return 0 if _write_output(result.lines, stdout) else 1
