"""Defines the data models used by the TagShield pipeline."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from tagshield.config import TagShieldConfig
from tagshield.match_state import EntryLifecycle, SkipReason
from tagshield.types import ProtectedText

if TYPE_CHECKING:
    from tagshield.translators.base import BaseTranslator


@dataclass
class TranslationEntry:
    """
    A single localization string and its translation.

    Attributes:
        key: The store key, ``"{resource}:{index}"``.
        original: The source text.
        translation: The translated text. None if not yet translated.
        protected: The protection result sent to the translator, if any.
        tokens_used: Tokens consumed by the translator for this entry.
        recovered_tags: Number of tags reinserted by local recovery.
        bracket_repairs: Number of bracket tags repaired.
        lifecycle: The current state of this entry in the pipeline.
        skip_reason: If lifecycle is SKIPPED, the structured reason why.

    """

    key: str
    original: str
    translation: str | None = None
    protected: ProtectedText | None = None
    tokens_used: int | None = None
    recovered_tags: int = 0
    bracket_repairs: int = 0
    lifecycle: EntryLifecycle = EntryLifecycle.LOADED
    skip_reason: SkipReason | None = None

    @property
    def is_skipped(self) -> bool:
        """Check if this entry has been skipped."""
        return self.lifecycle == EntryLifecycle.SKIPPED

    @property
    def needs_translation(self) -> bool:
        """Check if this entry is waiting for the translator."""
        return self.lifecycle == EntryLifecycle.PROTECTED

    def to_dict(self) -> dict[str, Any]:
        """Convert the entry to the store's JSON-serializable form."""
        result: dict[str, Any] = {"original": self.original}
        if self.translation is not None:
            result["translation"] = self.translation
        return result


@dataclass
class ExecutionContext:
    """Holds the state of a single pipeline run."""

    config: TagShieldConfig
    entries: list[TranslationEntry] = field(default_factory=list)
    translator: "BaseTranslator | None" = None
    repair_only: bool = False
    is_debug: bool = False

    def by_lifecycle(self, lifecycle: EntryLifecycle) -> list[TranslationEntry]:
        """Return the entries currently in the given state."""
        return [e for e in self.entries if e.lifecycle == lifecycle]
