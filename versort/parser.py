from __future__ import annotations

import re
from collections.abc import Sequence

from versort.schemas import (
    FailureReason,
    Identifier,
    ParseOutcome,
    Parsed,
    SortConfig,
    Unparsed,
    Version,
)

# Release segments are stored as unsigned 64-bit values; larger ones are rejected.
MAX_SEGMENT = 2**64 - 1
_MAX_SEGMENT_DIGITS = len(str(MAX_SEGMENT))

_DIGITS_RE = re.compile(r"[0-9]+")


def _split_counter(core: str) -> tuple[str, str | None, str | None]:
    """Return (release, counter, error) for a core string in counter mode."""
    if not core or not core[-1].isalpha():
        return core, None, None
    if len(core) >= 2 and core[-2] in "0123456789":
        return core[:-1], core[-1], None
    return core, None, f"trailing letter {core[-1]!r} must directly follow a digit"


def _parse_release(core: str) -> tuple[tuple[int, ...] | None, str]:
    segments = core.split(".")
    values: list[int] = []
    for seg in segments:
        if not seg:
            return None, "empty release segment"
        if not _DIGITS_RE.fullmatch(seg):
            return None, f"non-numeric release segment {seg!r}"
        # Checked before int(): very long digit strings exceed the int conversion limit.
        digits = seg.lstrip("0") or "0"
        if len(digits) > _MAX_SEGMENT_DIGITS:
            return None, f"release segment of {len(seg)} digits overflows"
        value = int(digits)
        if value > MAX_SEGMENT:
            return None, f"release segment {seg!r} overflows"
        values.append(value)
    return tuple(values), ""


def parse_version(raw: str, config: SortConfig | None = None) -> ParseOutcome:
    """Parse one input line into a `Parsed` or `Unparsed` outcome.

    Parsing never raises for bad input: every failure is reported as an
    `Unparsed` value carrying the original text and the reason.
    """
    config = config or SortConfig()
    s = raw.strip()
    if not s:
        return Unparsed(text=raw, reason=FailureReason.EMPTY_INPUT)

    if s[0] in "vV":
        s = s[1:]

    build: tuple[str, ...] | None = None
    if "+" in s:
        s, build_s = s.split("+", 1)
        build = tuple(build_s.split("."))

    prerelease: tuple[Identifier, ...] | None = None
    if "-" in s:
        s, pre_s = s.split("-", 1)
        prerelease = tuple(Identifier(part) for part in pre_s.split("."))

    counter: str | None = None
    # An explicit prerelease delimiter takes precedence over the counter suffix.
    if config.counter and prerelease is None:
        s, counter, error = _split_counter(s)
        if error:
            return Unparsed(
                text=raw, reason=FailureReason.MALFORMED_COUNTER_USAGE, detail=error
            )

    release, error = _parse_release(s)
    if release is None:
        return Unparsed(text=raw, reason=FailureReason.NON_NUMERIC_SEGMENT, detail=error)

    version = Version(release=release, prerelease=prerelease, build=build, counter=counter)
    return Parsed(text=raw, version=version)


def parse_lines(lines: Sequence[str], config: SortConfig | None = None) -> list[ParseOutcome]:
    config = config or SortConfig()
    return [parse_version(line, config) for line in lines]
