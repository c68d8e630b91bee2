from __future__ import annotations

import itertools

import pytest

from versort.engine import UnparsableLineError, apply_policy, sort_lines, sort_versions
from versort.parser import parse_lines
from versort.schemas import FailureReason, SortConfig


def test_sorts_release_versions() -> None:
    assert sort_versions(["2.0.0", "1.3.0", "1.2.4", "1.2.3"]) == [
        "1.2.3",
        "1.2.4",
        "1.3.0",
        "2.0.0",
    ]


def test_equal_versions_keep_input_order() -> None:
    assert sort_versions(["1.2.0", "1.3", "1.2", "1.1"]) == ["1.1", "1.2.0", "1.2", "1.3"]
    assert sort_versions(["1.2", "1.3", "1.2.0", "1.1"]) == ["1.1", "1.2", "1.2.0", "1.3"]


def test_build_metadata_ties_keep_input_order() -> None:
    assert sort_versions(["1.0+b", "0.1", "1.0+a"]) == ["0.1", "1.0+b", "1.0+a"]


def test_output_is_original_text() -> None:
    assert sort_versions(["v2.0", " 1.0 ", "V1.5"]) == [" 1.0 ", "V1.5", "v2.0"]


def test_sorting_is_idempotent() -> None:
    once = sort_versions(["1.0", "1.0-rc.1", "0.9.9", "1.0.1", "1.0-alpha"])
    assert sort_versions(once) == once


def test_result_does_not_depend_on_input_permutation() -> None:
    raws = ["1.0.0-alpha", "1.0.0-alpha.1", "1.0.0-beta", "1.0.0", "1.0.1", "2"]
    for perm in itertools.permutations(raws):
        assert sort_versions(list(perm)) == raws


def test_counter_mode_sort() -> None:
    assert sort_versions(["1.1", "1.0b", "1.0", "1.0a"], counter=True) == [
        "1.0",
        "1.0a",
        "1.0b",
        "1.1",
    ]


def test_first_unparsable_line_aborts() -> None:
    with pytest.raises(UnparsableLineError) as exc_info:
        sort_lines(["1.0.0", "not-a-version", "2.0.0", "also bad"])
    err = exc_info.value
    assert err.line_no == 2
    assert err.text == "not-a-version"
    assert err.reason == FailureReason.NON_NUMERIC_SEGMENT
    assert "line 2" in str(err)
    assert "'not-a-version'" in str(err)


def test_empty_line_aborts_by_default() -> None:
    with pytest.raises(UnparsableLineError) as exc_info:
        sort_lines(["1.0", ""])
    assert exc_info.value.reason == FailureReason.EMPTY_INPUT


def test_ignore_mode_drops_unparsable_lines() -> None:
    result = sort_lines(
        ["1.0.0", "not-a-version", "2.0.0"], SortConfig(ignore_unparsable=True)
    )
    assert result.lines == ["1.0.0", "2.0.0"]
    assert [(line_no, u.text) for line_no, u in result.dropped] == [(2, "not-a-version")]


def test_ignore_mode_with_counter() -> None:
    config = SortConfig(ignore_unparsable=True, counter=True)
    result = sort_lines(["1.0b", "1.0ab", "", "1.0"], config)
    assert result.lines == ["1.0", "1.0b"]
    assert [u.reason for _, u in result.dropped] == [
        FailureReason.MALFORMED_COUNTER_USAGE,
        FailureReason.EMPTY_INPUT,
    ]


def test_empty_input_sorts_to_nothing() -> None:
    assert sort_lines([]).lines == []
    assert sort_lines([]).dropped == []


def test_apply_policy_keeps_parsed_in_input_order() -> None:
    config = SortConfig(ignore_unparsable=True)
    kept, dropped = apply_policy(parse_lines(["3", "x", "1"], config), config)
    assert [p.text for p in kept] == ["3", "1"]
    assert len(dropped) == 1


def test_ignore_mode_drops_overflowing_release() -> None:
    huge = "1." + "9" * 5000
    result = sort_lines(["2.0", huge, "1.0"], SortConfig(ignore_unparsable=True))
    assert result.lines == ["1.0", "2.0"]
    assert [line_no for line_no, _ in result.dropped] == [2]


def test_sorts_very_long_numeric_prerelease() -> None:
    huge = "1.0-" + "9" * 5000
    assert sort_versions([huge, "1.0-1", "1.0"]) == ["1.0-1", huge, "1.0"]
