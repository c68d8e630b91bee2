from __future__ import annotations

import functools
from collections.abc import Callable
from itertools import zip_longest
from typing import Any

from versort.schemas import Identifier, Version


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _compare_release(a: tuple[int, ...], b: tuple[int, ...]) -> int:
    # Missing trailing segments count as zero, so 1.2 == 1.2.0.
    for left, right in zip_longest(a, b, fillvalue=0):
        if left != right:
            return _cmp(left, right)
    return 0


def _magnitude(digits: str) -> tuple[int, str]:
    # Orders digit strings by value without int(), which rejects very long inputs.
    stripped = digits.lstrip("0")
    return len(stripped), stripped


def _compare_identifier(a: Identifier, b: Identifier) -> int:
    if a.is_numeric and b.is_numeric:
        return _cmp(_magnitude(a.text), _magnitude(b.text))
    if a.is_numeric:
        return -1
    if b.is_numeric:
        return 1
    return _cmp(a.text, b.text)


def _compare_prerelease(
    a: tuple[Identifier, ...] | None, b: tuple[Identifier, ...] | None
) -> int:
    # A release outranks any prerelease of the same numbers.
    if a is None or b is None:
        return _cmp(a is None, b is None)
    for left, right in zip(a, b):
        result = _compare_identifier(left, right)
        if result:
            return result
    return _cmp(len(a), len(b))


def _compare_counter(a: str | None, b: str | None) -> int:
    if a is None or b is None:
        return _cmp(a is not None, b is not None)
    return _cmp(a, b)


def compare_versions(a: Version, b: Version, *, counter: bool = False) -> int:
    """Return -1, 0 or 1 as `a` sorts before, equal to, or after `b`.

    Build metadata never takes part. Counters are only consulted when
    `counter` is set.
    """
    result = _compare_release(a.release, b.release)
    if result:
        return result
    result = _compare_prerelease(a.prerelease, b.prerelease)
    if result or not counter:
        return result
    return _compare_counter(a.counter, b.counter)


def version_key(*, counter: bool = False) -> Callable[[Version], Any]:
    return functools.cmp_to_key(functools.partial(compare_versions, counter=counter))
