"""
Text coverage tracking module.

Tracks which character ranges of a text have already been claimed by
accepted tags. The pattern catalog uses it to reject candidates that overlap
an earlier, higher-priority tag, and the pipeline uses it to detect entries
that consist of nothing but tags.

Usage example:
    >>> coverage = TextCoverage("[Color:Red] Hi")
    >>> coverage.add_range(0, 11)
    >>> coverage.overlaps(5, 8)
    True
    >>> coverage.get_uncovered_text()
    ' Hi'
"""

from bisect import bisect_right
from dataclasses import dataclass, field


def merge_ranges(ranges: list[tuple[int, int]]) -> list[tuple[int, int]]:
    """
    Merge overlapping or adjacent ranges.

    Args:
        ranges: List of ranges, each range is a (start, end) tuple representing [start, end)

    Returns:
        Merged list of ranges, guaranteed non-overlapping and sorted

    Examples:
        >>> merge_ranges([(0, 3), (2, 5), (7, 9)])
        [(0, 5), (7, 9)]
        >>> merge_ranges([(0, 3), (3, 5)])
        [(0, 5)]

    """
    if not ranges:
        return []

    sorted_ranges = sorted(ranges, key=lambda r: r[0])
    merged: list[tuple[int, int]] = [sorted_ranges[0]]

    for current_start, current_end in sorted_ranges[1:]:
        last_start, last_end = merged[-1]
        if current_start <= last_end:
            merged[-1] = (last_start, max(last_end, current_end))
        else:
            merged.append((current_start, current_end))

    return merged


@dataclass
class TextCoverage:
    """
    Track covered ranges of a text.

    Attributes:
        original_text: Original text string
        covered_ranges: Merged, sorted list of covered (start, end) ranges

    """

    original_text: str
    covered_ranges: list[tuple[int, int]] = field(default_factory=list)

    def add_range(self, start: int, end: int) -> None:
        """
        Add a coverage range [start, end).

        Raises:
            ValueError: If range is invalid (start > end or exceeds text bounds)

        """
        if start > end:
            msg = f"Invalid range: start ({start}) cannot be greater than end ({end})"
            raise ValueError(msg)

        if start < 0:
            msg = f"Invalid range: start ({start}) cannot be less than 0"
            raise ValueError(msg)

        if end > len(self.original_text):
            msg = f"Invalid range: end ({end}) exceeds text length ({len(self.original_text)})"
            raise ValueError(msg)

        if start == end:
            return

        self.covered_ranges.append((start, end))
        self.covered_ranges = merge_ranges(self.covered_ranges)

    def overlaps(self, start: int, end: int) -> bool:
        """
        Check whether [start, end) shares any character with a covered range.

        Touching ranges do not overlap: (0, 5) and (5, 7) are disjoint.
        """
        if start >= end or not self.covered_ranges:
            return False
        # Last covered range starting before `end` is the only candidate.
        idx = bisect_right(self.covered_ranges, (end, -1)) - 1
        if idx < 0:
            return False
        _, covered_end = self.covered_ranges[idx]
        return covered_end > start

    def get_uncovered_ranges(self) -> list[tuple[int, int]]:
        """Return the list of ranges not covered by any tag."""
        text_length = len(self.original_text)

        if not self.covered_ranges:
            return [(0, text_length)] if text_length > 0 else []

        merged = self.covered_ranges
        uncovered: list[tuple[int, int]] = []

        if merged[0][0] > 0:
            uncovered.append((0, merged[0][0]))

        for i in range(len(merged) - 1):
            gap_start = merged[i][1]
            gap_end = merged[i + 1][0]
            if gap_start < gap_end:
                uncovered.append((gap_start, gap_end))

        if merged[-1][1] < text_length:
            uncovered.append((merged[-1][1], text_length))

        return uncovered

    def get_uncovered_text(self) -> str:
        """Concatenate the text of all uncovered ranges."""
        return "".join(self.original_text[start:end] for start, end in self.get_uncovered_ranges())
