"""Tests for the reporting classes."""

import unittest
from unittest.mock import MagicMock, call, patch

from tagshield.config import TagShieldConfig
from tagshield.match_state import EntryLifecycle
from tagshield.models import ExecutionContext, TranslationEntry
from tagshield.reporters.summary_reporter import SummaryReporter


class TestSummaryReporter(unittest.TestCase):
    """Test suite for the SummaryReporter."""

    def setUp(self) -> None:
        """Set up a context with entries in several states."""
        self.context = ExecutionContext(
            config=TagShieldConfig(),
            entries=[
                TranslationEntry(key="a:0", original="x", lifecycle=EntryLifecycle.RESTORED, tokens_used=4, recovered_tags=2),
                TranslationEntry(key="a:1", original="y", lifecycle=EntryLifecycle.RESTORED, tokens_used=3, bracket_repairs=1),
                TranslationEntry(key="a:2", original="", lifecycle=EntryLifecycle.SKIPPED),
            ],
        )

    @patch("tagshield.reporters.summary_reporter.logger")
    def test_generate_logs_counts(self, mock_logger: MagicMock) -> None:
        """1. Counts: Per-lifecycle counts and totals are logged."""
        SummaryReporter().generate(self.context)
        mock_logger.info.assert_has_calls(
            [
                call("--- Execution Summary (%s mode) ---", "translate"),
                call("Total entries: %d", 3),
                call("  - %s: %d", "Skipped", 1),
                call("  - %s: %d", "Restored", 2),
                call("Tags recovered by position: %d", 2),
                call("Bracket tags repaired: %d", 1),
                call("Total tokens used for translation: %d", 7),
            ],
        )
        mock_logger.warning.assert_not_called()

    @patch("tagshield.reporters.summary_reporter.logger")
    def test_generate_warns_about_failures(self, mock_logger: MagicMock) -> None:
        """2. Failures: Failed entries produce a warning."""
        self.context.entries.append(TranslationEntry(key="a:3", original="z", lifecycle=EntryLifecycle.FAILED))
        self.context.repair_only = True
        SummaryReporter().generate(self.context)
        mock_logger.info.assert_any_call("--- Execution Summary (%s mode) ---", "repair")
        mock_logger.warning.assert_called_once_with("%d entries failed to translate and were left unchanged.", 1)
