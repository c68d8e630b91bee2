from __future__ import annotations

from versort.parser import parse_version
from versort.schemas import Parsed, SortConfig, Version


def v(raw: str, *, counter: bool = False) -> Version:
    """Parse `raw`, failing the test if it does not parse."""
    outcome = parse_version(raw, SortConfig(counter=counter))
    assert isinstance(outcome, Parsed), outcome
    return outcome.version
