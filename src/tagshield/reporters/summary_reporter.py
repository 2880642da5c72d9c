"""A reporter for generating concise execution summaries."""

import logging

from tagshield.match_state import EntryLifecycle
from tagshield.models import ExecutionContext

logger = logging.getLogger(__name__)


class SummaryReporter:
    """Generates a concise summary of a pipeline run and logs it."""

    def generate(self, context: ExecutionContext) -> None:
        """Log per-lifecycle counts and repair totals to the console."""
        mode = "repair" if context.repair_only else "translate"
        logger.info("--- Execution Summary (%s mode) ---", mode)
        logger.info("Total entries: %d", len(context.entries))

        for lifecycle in EntryLifecycle:
            count = len(context.by_lifecycle(lifecycle))
            if count:
                logger.info("  - %s: %d", lifecycle.value.capitalize(), count)

        recovered = sum(e.recovered_tags for e in context.entries)
        if recovered:
            logger.info("Tags recovered by position: %d", recovered)

        repaired = sum(e.bracket_repairs for e in context.entries)
        if repaired:
            logger.info("Bracket tags repaired: %d", repaired)

        total_tokens = sum(e.tokens_used for e in context.entries if e.tokens_used is not None)
        if total_tokens > 0:
            logger.info("Total tokens used for translation: %d", total_tokens)

        failed = context.by_lifecycle(EntryLifecycle.FAILED)
        if failed:
            logger.warning("%d entries failed to translate and were left unchanged.", len(failed))

        logger.info("-------------------------------------------------")
