"""
The tag pattern catalog.

A catalog is an ordered table of matchers. Each matcher produces candidate
spans over a text buffer; the catalog accepts candidates greedily, in
priority order and then left to right, rejecting any candidate that overlaps
an already accepted span. Structurally specific tags (brackets, braces,
markers) therefore claim their characters before the generic heuristics
(parentheticals, abbreviations) get a chance to match a fragment of them.

New tag dialects are supported by building a catalog with extra patterns;
the encoder and both decoders only ever call ``PatternCatalog.scan``.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Final

import regex

from .text_coverage import TextCoverage
from .types import CandidateMatch

__all__ = [
    "DEFAULT_ABBREVIATIONS",
    "DEFAULT_CATALOG",
    "PROSE_PATTERN_NAMES",
    "STRUCTURAL_CATALOG",
    "AbbreviationPattern",
    "PatternCatalog",
    "RegexTagPattern",
    "TagPattern",
    "build_default_patterns",
]

logger = logging.getLogger(__name__)

# Stat and unit abbreviations that must reach the target text untranslated.
DEFAULT_ABBREVIATIONS: Final[tuple[str, ...]] = (
    "EXP", "PST", "CP", "SP", "HP", "AP", "TP", "WP", "DP",
    "ATK", "DEF", "AGI", "DEX", "LUK", "CRI", "BLK",
    "DPS", "DOT", "AOE", "HoT", "MPH",
    "Lv", "LV", "MAX", "DLC", "NPC", "QTE", "UI", "HUD",
    "KO", "NG", "NG+",
    "m", "s", "x", "g", "kg", "km", "cm", "mm",
)  # fmt: skip

# Patterns whose matches can read as ordinary prose.
PROSE_PATTERN_NAMES: Final[frozenset[str]] = frozenset({"angle_markup", "descriptive_parenthetical", "abbreviation"})


class TagPattern(ABC):
    """A named matcher that produces candidate tag spans over a text buffer."""

    def __init__(self, name: str) -> None:
        """
        Initialize the pattern.

        Args:
            name: A unique, human-readable identifier within a catalog.

        """
        if not name:
            msg = "A tag pattern requires a non-empty name."
            raise ValueError(msg)
        self.name = name

    @abstractmethod
    def find_spans(self, text: str) -> Iterator[CandidateMatch]:
        """Yield candidate spans in left-to-right order."""
        raise NotImplementedError

    def __repr__(self) -> str:
        """Return a debug representation of the pattern."""
        return f"{self.__class__.__name__}(name={self.name!r})"


class RegexTagPattern(TagPattern):
    """A tag pattern backed by a compiled regular expression."""

    def __init__(self, name: str, pattern: str, flags: int = 0) -> None:
        """
        Compile the pattern.

        Raises:
            ValueError: If the pattern is not a valid regular expression.

        """
        super().__init__(name)
        try:
            self.regex = regex.compile(pattern, flags)
        except regex.error as e:
            msg = f"Invalid regex pattern for tag pattern '{name}': {e}"
            raise ValueError(msg) from e

    def find_spans(self, text: str) -> Iterator[CandidateMatch]:
        """Yield every non-empty match of the expression."""
        for match in self.regex.finditer(text):
            start, end = match.span()
            if end > start:
                yield CandidateMatch(start=start, end=end, text=match.group(0), pattern=self.name)


class AbbreviationPattern(RegexTagPattern):
    """Whole-word, case-sensitive matches from a fixed vocabulary."""

    def __init__(self, abbreviations: Iterable[str], name: str = "abbreviation") -> None:
        """
        Build a single alternation over the vocabulary.

        Longer entries are tried first so that ``NG+`` wins over ``NG``.
        """
        self.abbreviations = tuple(sorted({a for a in abbreviations if a}, key=lambda a: (-len(a), a)))
        alternation = "|".join(regex.escape(a) for a in self.abbreviations)
        # An empty alternation would match the empty string everywhere; (?!) never matches.
        body = alternation or "(?!)"
        super().__init__(name, rf"(?<!\w)(?:{body})(?!\w)")

    def with_abbreviations(self, extra: Iterable[str]) -> "AbbreviationPattern":
        """Return a copy of this pattern with additional vocabulary."""
        return AbbreviationPattern([*self.abbreviations, *extra], name=self.name)


def build_default_patterns(abbreviations: Iterable[str] = DEFAULT_ABBREVIATIONS) -> list[TagPattern]:
    """Build the built-in patterns, highest priority first."""
    return [
        # Consecutive private-use icons form one atomic block.
        RegexTagPattern("pua_run", "[\ue000-\ue0ff]+"),
        RegexTagPattern("bracket_key_value", r"\[\w+:[^\]]*?\s*\](?:\s*\([^)]{1,100}\))?"),
        RegexTagPattern("numbered_bracket_code", r"\d+\[[A-Z]{2,10}\]"),
        RegexTagPattern("bracket_code_number", r"\[[A-Z]{2,10}\]\d+"),
        RegexTagPattern("bracket_assignment", r"\[\w+=\w[^\]]*\]"),
        RegexTagPattern("brace_key_value", r"\{\w+:\w[^}]*\}"),
        RegexTagPattern("brace_placeholder", r"\{\w+\}"),
        RegexTagPattern("control_marker", "[\ufff9-\ufffc]"),
        RegexTagPattern("angle_markup", r"<[\w/][^>]*>"),
        RegexTagPattern("descriptive_parenthetical", r"\([A-Z][^)]{1,100}\)"),
        AbbreviationPattern(abbreviations),
    ]


class PatternCatalog:
    """An ordered, immutable table of tag patterns."""

    def __init__(self, patterns: Iterable[TagPattern]) -> None:
        """
        Initialize the catalog.

        Raises:
            ValueError: If two patterns share a name.

        """
        self._patterns: tuple[TagPattern, ...] = tuple(patterns)
        seen: set[str] = set()
        for pattern in self._patterns:
            if pattern.name in seen:
                msg = f"Duplicate tag pattern name: '{pattern.name}'"
                raise ValueError(msg)
            seen.add(pattern.name)

    @property
    def patterns(self) -> tuple[TagPattern, ...]:
        """The patterns, highest priority first."""
        return self._patterns

    @property
    def names(self) -> list[str]:
        """The pattern names, highest priority first."""
        return [p.name for p in self._patterns]

    def __iter__(self) -> Iterator[TagPattern]:
        """Iterate over the patterns by priority."""
        return iter(self._patterns)

    def __len__(self) -> int:
        """Return the number of patterns."""
        return len(self._patterns)

    def __repr__(self) -> str:
        """Return a debug representation of the catalog."""
        return f"PatternCatalog({self.names!r})"

    def get(self, name: str) -> TagPattern | None:
        """Return the pattern with the given name, if any."""
        return next((p for p in self._patterns if p.name == name), None)

    def extend(self, *patterns: TagPattern) -> "PatternCatalog":
        """Return a new catalog with the patterns appended at the lowest priority."""
        return PatternCatalog([*self._patterns, *patterns])

    def without(self, *names: str) -> "PatternCatalog":
        """Return a new catalog without the named patterns."""
        unknown = set(names) - set(self.names)
        if unknown:
            msg = f"Unknown tag pattern name(s): {', '.join(sorted(unknown))}"
            raise ValueError(msg)
        return PatternCatalog(p for p in self._patterns if p.name not in names)

    def structural(self) -> "PatternCatalog":
        """Return a new catalog without the prose-like patterns (markup, parentheticals, abbreviations)."""
        return PatternCatalog(p for p in self._patterns if p.name not in PROSE_PATTERN_NAMES)

    def with_abbreviations(self, extra: Iterable[str]) -> "PatternCatalog":
        """Return a new catalog whose abbreviation patterns include the extra vocabulary."""
        extra = list(extra)
        if not extra:
            return self
        return PatternCatalog(p.with_abbreviations(extra) if isinstance(p, AbbreviationPattern) else p for p in self._patterns)

    def scan(self, text: str) -> list[CandidateMatch]:
        """
        Collect the accepted, pairwise non-overlapping tag spans of a text.

        Candidates are considered pattern by pattern in priority order and,
        within a pattern, left to right. A candidate is accepted iff it
        overlaps no previously accepted span.

        Returns:
            The accepted spans sorted by start offset.

        """
        if not text:
            return []

        coverage = TextCoverage(text)
        accepted: list[CandidateMatch] = []
        for pattern in self._patterns:
            for candidate in pattern.find_spans(text):
                if coverage.overlaps(candidate.start, candidate.end):
                    continue
                coverage.add_range(candidate.start, candidate.end)
                accepted.append(candidate)

        accepted.sort(key=lambda c: c.start)
        if accepted:
            logger.debug("Catalog accepted %d tag span(s) in text of length %d.", len(accepted), len(text))
        return accepted

    def coverage(self, text: str) -> TextCoverage:
        """Return the coverage of a text by its accepted tag spans."""
        coverage = TextCoverage(text)
        for candidate in self.scan(text):
            coverage.add_range(candidate.start, candidate.end)
        return coverage


DEFAULT_CATALOG: Final[PatternCatalog] = PatternCatalog(build_default_patterns())

STRUCTURAL_CATALOG: Final[PatternCatalog] = DEFAULT_CATALOG.structural()
