"""
Entry lifecycle state management for TagShield.

Architecture:
    EntryLifecycle (Enum) → Represents WHERE an entry is in the pipeline
    SkipReason (Dataclass) → Represents WHY an entry was skipped (if applicable)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal


class EntryLifecycle(str, Enum):
    """
    Represents the lifecycle state of a TranslationEntry in the pipeline.

    State Transition Flow:
        LOADED → [SKIPPED] → PROTECTED → TRANSLATED | FAILED → RESTORED
        LOADED → RESTORED                      (repair mode, existing translation)

    """

    LOADED = "loaded"
    """Entry was read from the store and not yet processed."""

    SKIPPED = "skipped"
    """Entry needs no translation (see skip_reason)."""

    PROTECTED = "protected"
    """Tags were replaced by placeholders; the clean text awaits translation."""

    TRANSLATED = "translated"
    """The translator returned a result that has not been restored yet."""

    FAILED = "failed"
    """The translator raised or returned no result for this entry."""

    RESTORED = "restored"
    """Tags were restored into the translation."""


@dataclass(frozen=True)
class SkipReason:
    """
    Represents why an entry was skipped.

    Attributes:
        category: The high-level category of the skip reason.
        code: A machine-readable identifier for the specific reason.
        message: A human-readable explanation (optional, for logging/debugging).

    """

    category: Literal["validation", "optimization", "mode"]
    code: str
    message: str | None = None

    def __str__(self) -> str:
        """Return a human-readable representation of the skip reason."""
        if self.message:
            return f"{self.category}:{self.code} ({self.message})"
        return f"{self.category}:{self.code}"


SKIP_EMPTY = SkipReason(
    category="validation",
    code="empty",
    message="Empty or whitespace-only text",
)

SKIP_ALL_TAGS = SkipReason(
    category="optimization",
    code="all_tags",
    message="Text consists only of protected tags and whitespace",
)
"""The text has nothing to translate; the original is used as the translation."""

SKIP_ALREADY_TRANSLATED = SkipReason(
    category="mode",
    code="already_translated",
    message="Entry already has a translation",
)
