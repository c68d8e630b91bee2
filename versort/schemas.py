from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict


class FailureReason(str, Enum):
    EMPTY_INPUT = "empty"
    NON_NUMERIC_SEGMENT = "non_numeric_segment"
    MALFORMED_COUNTER_USAGE = "malformed_counter_usage"


class SortConfig(BaseModel):
    """Options shared by the parser and the sort engine."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Drop unparsable lines instead of failing the run.
    ignore_unparsable: bool = False
    # Treat a single trailing letter (e.g. "3.2a") as an ordinal counter.
    counter: bool = False


@dataclass(frozen=True, slots=True)
class Identifier:
    text: str

    @property
    def is_numeric(self) -> bool:
        return bool(self.text) and self.text.isascii() and self.text.isdigit()

    @property
    def value(self) -> int:
        if not self.is_numeric:
            raise ValueError(f"identifier is not numeric: {self.text!r}")
        return int(self.text)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Version:
    release: tuple[int, ...]
    prerelease: tuple[Identifier, ...] | None = None
    # NOTE: build must not affect precedence.
    build: tuple[str, ...] | None = None
    counter: str | None = None

    def __post_init__(self) -> None:
        if not self.release:
            raise ValueError("release must contain at least one segment")
        if self.counter is not None and len(self.counter) != 1:
            raise ValueError("counter must be a single character")


@dataclass(frozen=True, slots=True)
class Parsed:
    text: str
    version: Version


@dataclass(frozen=True, slots=True)
class Unparsed:
    text: str
    reason: FailureReason
    detail: str = ""

    def describe(self) -> str:
        return self.detail or self.reason.value.replace("_", " ")


ParseOutcome = Union[Parsed, Unparsed]
