"""Manages the overall TagShield protect-translate-restore workflow."""

import logging
from typing import TYPE_CHECKING

from .config import TagShieldConfig
from .models import ExecutionContext, TranslationEntry
from .processing import (
    ProtectionProcessor,
    RestorationProcessor,
    TranslationProcessor,
)
from .reporters import SummaryReporter

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .processing import Processor
    from .translators.base import BaseTranslator

logger = logging.getLogger(__name__)


def run_entries(
    entries: list[TranslationEntry],
    config: TagShieldConfig,
    *,
    translator: "BaseTranslator | None" = None,
    repair_only: bool = False,
    debug: bool = False,
) -> list[TranslationEntry]:
    """
    Run the processor pipeline over a list of entries.

    In translate mode, entries without a translation are protected, sent to
    the translator and restored. In repair mode, no translator is called and
    the existing translations are repaired in place.

    Args:
        entries: The entries to process. They are updated in place.
        config: The application configuration.
        translator: The translator to use in translate mode.
        repair_only: If True, only repair existing translations.
        debug: If True, enables debug behaviors in the translator.

    Returns:
        The processed entries.

    """
    context = ExecutionContext(
        config=config,
        entries=entries,
        translator=translator,
        repair_only=repair_only,
        is_debug=debug,
    )

    logger.info("Processing %d entries in %s mode.", len(entries), "repair" if repair_only else "translate")

    # Protection is a no-op in repair mode, which leaves nothing to translate.
    pipeline: Sequence[Processor] = [
        ProtectionProcessor(),
        TranslationProcessor(),
        RestorationProcessor(),
    ]

    for processor in pipeline:
        logger.debug("Executing processor: %s", processor.__class__.__name__)
        processor.process(context)

    SummaryReporter().generate(context)
    return context.entries
