"""Processor that protects tags before translation."""

import logging

from tagshield.match_state import SKIP_ALL_TAGS, SKIP_ALREADY_TRANSLATED, SKIP_EMPTY, EntryLifecycle
from tagshield.models import ExecutionContext
from tagshield.protection import protect

from .base import Processor

__all__ = ["ProtectionProcessor"]

logger = logging.getLogger(__name__)


class ProtectionProcessor(Processor):
    """Phase 1: Replace the tags of untranslated entries with placeholders."""

    def process(self, context: ExecutionContext) -> None:
        """
        Protect every loaded entry that has no translation yet.

        Empty entries and entries made only of tags are skipped; the latter
        keep their original text as the translation.
        """
        if context.repair_only:
            logger.debug("Repair mode: skipping protection phase.")
            return

        catalog = context.config.build_catalog()
        placeholder = context.config.build_placeholder()
        protected_count = 0

        for entry in context.entries:
            if entry.lifecycle != EntryLifecycle.LOADED:
                continue

            if entry.translation is not None:
                entry.lifecycle = EntryLifecycle.SKIPPED
                entry.skip_reason = SKIP_ALREADY_TRANSLATED
                continue

            if not entry.original.strip():
                entry.lifecycle = EntryLifecycle.SKIPPED
                entry.skip_reason = SKIP_EMPTY
                continue

            coverage = catalog.coverage(entry.original)
            if not coverage.get_uncovered_text().strip():
                logger.debug("[Full Coverage] Entry '%s' consists only of tags.", entry.key)
                entry.translation = entry.original
                entry.lifecycle = EntryLifecycle.SKIPPED
                entry.skip_reason = SKIP_ALL_TAGS
                continue

            entry.protected = protect(entry.original, catalog=catalog, placeholder=placeholder)
            entry.lifecycle = EntryLifecycle.PROTECTED
            protected_count += 1

        logger.info("Protected %d entries for translation.", protected_count)
