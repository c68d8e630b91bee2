from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from versort.compare import version_key
from versort.parser import parse_lines
from versort.schemas import FailureReason, Parsed, ParseOutcome, SortConfig, Unparsed

logger = logging.getLogger(__name__)


class UnparsableLineError(ValueError):
    def __init__(self, *, line_no: int, outcome: Unparsed) -> None:
        self.line_no = line_no
        self.outcome = outcome
        super().__init__(
            f"line {line_no}: failed to parse {outcome.text!r} into a version: "
            f"{outcome.describe()}"
        )

    @property
    def text(self) -> str:
        return self.outcome.text

    @property
    def reason(self) -> FailureReason:
        return self.outcome.reason


@dataclass(frozen=True)
class SortResult:
    lines: list[str]
    dropped: list[tuple[int, Unparsed]]


def apply_policy(
    outcomes: Sequence[ParseOutcome], config: SortConfig
) -> tuple[list[Parsed], list[tuple[int, Unparsed]]]:
    """Split outcomes into survivors and dropped lines.

    Without `ignore_unparsable` the first failure (in input order) raises
    `UnparsableLineError` and nothing survives.
    """
    kept: list[Parsed] = []
    dropped: list[tuple[int, Unparsed]] = []
    for line_no, outcome in enumerate(outcomes, start=1):
        if isinstance(outcome, Parsed):
            kept.append(outcome)
            continue
        if not config.ignore_unparsable:
            raise UnparsableLineError(line_no=line_no, outcome=outcome)
        logger.debug("dropping line %d %r: %s", line_no, outcome.text, outcome.describe())
        dropped.append((line_no, outcome))
    return kept, dropped


def sort_parsed(parsed: Iterable[Parsed], config: SortConfig) -> list[Parsed]:
    # sorted() is stable: equal versions keep their input order.
    key = version_key(counter=config.counter)
    return sorted(parsed, key=lambda p: key(p.version))


def sort_lines(lines: Sequence[str], config: SortConfig | None = None) -> SortResult:
    config = config or SortConfig()
    outcomes = parse_lines(lines, config)
    logger.debug("parsed %d lines (counter=%s)", len(outcomes), config.counter)

    kept, dropped = apply_policy(outcomes, config)
    ordered = sort_parsed(kept, config)
    return SortResult(lines=[p.text for p in ordered], dropped=dropped)


def sort_versions(
    lines: Sequence[str], *, ignore: bool = False, counter: bool = False
) -> list[str]:
    config = SortConfig(ignore_unparsable=ignore, counter=counter)
    return sort_lines(lines, config).lines
