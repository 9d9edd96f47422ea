"""Alternating background shading for groups of matched lines."""

from __future__ import annotations

from typing import Iterable


def merge_ranges(before: int, after: int, matched: Iterable[int]) -> list[tuple[int, int]]:
    """Context ranges around each matched line, merging ranges that touch."""
    ranges: list[tuple[int, int]] = []
    for line in matched:
        start, end = line - before, line + after
        if ranges and start - 1 <= ranges[-1][1]:
            ranges[-1] = (ranges[-1][0], end)
        else:
            ranges.append((start, end))
    return ranges


def do_zebra(
    before: int, after: int, matched: Iterable[int], initial: bool
) -> tuple[dict[int, bool], bool]:
    """Shade each line of the merged ranges, alternating from ``initial``.

    Returns the shading per line and the value the next call should start with.
    """
    ranges = merge_ranges(before, after, matched)
    shading: dict[int, bool] = {}
    for index, (start, end) in enumerate(ranges):
        value = initial if index % 2 == 0 else not initial
        shading.update(dict.fromkeys(range(start, end + 1), value))
    next_initial = not initial if len(ranges) % 2 else initial
    return shading, next_initial