"""Defines shared data structures and types for TagShield."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CandidateMatch:
    """
    A span produced by a tag pattern over a text buffer.

    Attributes:
        start: Start offset in the scanned text (inclusive).
        end: End offset in the scanned text (exclusive).
        text: The matched substring, equal to ``source[start:end]``.
        pattern: The name of the catalog pattern that produced the span.

    """

    start: int
    end: int
    text: str
    pattern: str = ""

    def __post_init__(self) -> None:
        """Validate the span boundaries."""
        if self.start < 0 or self.end < self.start:
            msg = f"Invalid span: ({self.start}, {self.end})"
            raise ValueError(msg)

    def overlaps(self, other: "CandidateMatch") -> bool:
        """Check whether two spans share at least one character."""
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True)
class ProtectedTag:
    """A tag removed from the source text and replaced by a placeholder."""

    index: int
    original: str
    position: int

    def to_dict(self) -> dict[str, Any]:
        """Convert the tag to a JSON-serializable dictionary."""
        return {"index": self.index, "original": self.original, "position": self.position}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProtectedTag":
        """Build a tag from a dictionary produced by ``to_dict``."""
        return cls(index=int(data["index"]), original=str(data["original"]), position=int(data["position"]))


@dataclass
class ProtectedText:
    """
    The result of protecting a text.

    Attributes:
        clean_text: The source text with each tag replaced by its placeholder.
        tags: The protected tags, ordered by ascending position.

    """

    clean_text: str
    tags: list[ProtectedTag] = field(default_factory=list)

    @property
    def has_tags(self) -> bool:
        """Check if any tag was protected."""
        return bool(self.tags)


@dataclass(frozen=True)
class RestorePreview:
    """A before/after pair describing what local tag restoration would change."""

    before: str
    after: str

    @property
    def has_diff(self) -> bool:
        """Check if restoration changes the translation."""
        return self.before != self.after


@dataclass
class BracketFixStats:
    """Counts of bracket repairs, grouped by the kind of damage found."""

    reversed: int = 0
    mismatched: int = 0
    bare: int = 0
    total: int = 0

    def record(self, kind: str) -> None:
        """Count one repair of the given kind."""
        if kind not in ("reversed", "mismatched", "bare"):
            msg = f"Unknown bracket repair kind: '{kind}'"
            raise ValueError(msg)
        setattr(self, kind, getattr(self, kind) + 1)
        self.total += 1


@dataclass
class BracketFixResult:
    """The repaired translation and the repair statistics."""

    text: str
    stats: BracketFixStats = field(default_factory=BracketFixStats)


@dataclass
class TranslationResult:
    """The outcome of translating a single text."""

    translated_text: str
    tokens_used: int | None = None
