"""Processor that puts tags back into translations."""

import logging

from tagshield.bracket_fix import fix_tag_brackets
from tagshield.match_state import EntryLifecycle
from tagshield.models import ExecutionContext, TranslationEntry
from tagshield.patterns import PatternCatalog
from tagshield.placeholders import PlaceholderFormat
from tagshield.protection import restore
from tagshield.restoration import auto_fix, find_missing_tags, strip_foreign_tags

from .base import Processor

__all__ = ["RestorationProcessor"]

logger = logging.getLogger(__name__)


class RestorationProcessor(Processor):
    """
    Phase 3: Restore and repair the tags of every translation.

    Translated entries get their placeholders restored. In repair mode, loaded
    entries that already carry a translation go through the same repairs.
    Bracket repair runs before heuristic recovery so a mangled tag is fixed in
    place instead of being inserted a second time.
    """

    def process(self, context: ExecutionContext) -> None:
        """Restore the tags of every eligible entry."""
        catalog = context.config.build_catalog()
        placeholder = context.config.build_placeholder()
        restored_count = 0

        for entry in context.entries:
            if not self._is_eligible(entry, repair_only=context.repair_only):
                continue
            self._restore_entry(context, entry, catalog, placeholder)
            restored_count += 1

        logger.info("Restored tags in %d entries.", restored_count)

    @staticmethod
    def _is_eligible(entry: TranslationEntry, *, repair_only: bool) -> bool:
        if entry.translation is None:
            return False
        if entry.lifecycle == EntryLifecycle.TRANSLATED:
            return True
        return repair_only and entry.lifecycle == EntryLifecycle.LOADED

    def _restore_entry(
        self,
        context: ExecutionContext,
        entry: TranslationEntry,
        catalog: PatternCatalog,
        placeholder: PlaceholderFormat,
    ) -> None:
        text = entry.translation or ""
        if entry.protected is not None and entry.protected.tags:
            text = restore(text, entry.protected.tags, placeholder=placeholder)

        if context.config.pipeline.fix_brackets:
            result = fix_tag_brackets(entry.original, text)
            text = result.text
            entry.bracket_repairs = result.stats.total

        if context.config.pipeline.strip_foreign:
            text = strip_foreign_tags(entry.original, text, catalog=catalog.structural())

        missing = find_missing_tags(entry.original, text, catalog=catalog)
        if missing:
            logger.warning(
                "Entry '%s': %d tag(s) missing from translation, recovering by position.",
                entry.key,
                len(missing),
            )
        entry.recovered_tags = len(missing)
        entry.translation = auto_fix(entry.original, text, catalog=catalog)
        entry.lifecycle = EntryLifecycle.RESTORED
