"""Processor that sends protected text across the translation boundary."""

import logging

from tagshield.match_state import EntryLifecycle
from tagshield.models import ExecutionContext, TranslationEntry

from .base import Processor

__all__ = ["TranslationProcessor", "create_batches"]

logger = logging.getLogger(__name__)


def create_batches(entries: list[TranslationEntry], batch_size: int) -> list[list[TranslationEntry]]:
    """Split entries into consecutive batches of at most `batch_size`."""
    return [entries[i : i + batch_size] for i in range(0, len(entries), batch_size)]


class TranslationProcessor(Processor):
    """Phase 2: Translate the clean text of every protected entry."""

    def process(self, context: ExecutionContext) -> None:
        """
        Translate protected entries in batches.

        A failing batch marks its entries as FAILED and the run continues.
        """
        pending = [e for e in context.entries if e.needs_translation]
        if not pending:
            return

        if context.translator is None:
            logger.error("No translator available; %d entries left untranslated.", len(pending))
            for entry in pending:
                entry.lifecycle = EntryLifecycle.FAILED
            return

        batches = create_batches(pending, context.config.pipeline.batch_size)
        logger.info("Translating %d entries in %d batch(es).", len(pending), len(batches))
        for batch_number, batch in enumerate(batches, start=1):
            self._translate_batch(context, batch, batch_number)

    def _translate_batch(self, context: ExecutionContext, batch: list[TranslationEntry], batch_number: int) -> None:
        texts = [entry.protected.clean_text if entry.protected else entry.original for entry in batch]
        try:
            results = context.translator.translate(
                texts,
                target_language=context.config.target_lang,
                source_language=context.config.source_lang,
                debug=context.is_debug,
            )
        except Exception:
            logger.exception("Batch %d failed; %d entries left untranslated.", batch_number, len(batch))
            for entry in batch:
                entry.lifecycle = EntryLifecycle.FAILED
            return

        if len(results) != len(batch):
            logger.warning("Batch %d: expected %d results, got %d.", batch_number, len(batch), len(results))

        for index, entry in enumerate(batch):
            if index >= len(results):
                entry.lifecycle = EntryLifecycle.FAILED
                continue
            entry.translation = results[index].translated_text
            entry.tokens_used = results[index].tokens_used
            entry.lifecycle = EntryLifecycle.TRANSLATED
