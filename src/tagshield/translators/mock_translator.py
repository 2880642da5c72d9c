"""A mock translator for testing purposes."""

import logging

import regex

from tagshield.placeholders import DEFAULT_PLACEHOLDER, PlaceholderFormat
from tagshield.types import TranslationResult

from .base import BaseTranslator

logger = logging.getLogger(__name__)


class MockTranslatorError(Exception):
    """Custom exception for mock translator errors."""


class MockTranslator(BaseTranslator):
    """
    A mock translator for testing that prepends a '[MOCK]' prefix.

    It can also be configured to raise an exception, or to delete placeholder
    tokens from its output to simulate a translator that drops markup.
    """

    def __init__(
        self,
        *,
        return_error: bool = False,
        drop_placeholders: bool = False,
        placeholder: PlaceholderFormat | None = None,
    ) -> None:
        """
        Initialize the Mock Translator.

        Args:
            return_error: If True, the translate method will raise an exception.
            drop_placeholders: If True, placeholder tokens are removed from the output.
            placeholder: The placeholder format to recognize when dropping tokens.

        """
        self.return_error = return_error
        self.drop_placeholders = drop_placeholders
        placeholder = placeholder or DEFAULT_PLACEHOLDER
        self._token_pattern = regex.compile(rf"{regex.escape(placeholder.prefix)}\d+{regex.escape(placeholder.suffix)}\s?")

    def translate(
        self,
        texts: list[str],
        target_language: str,
        source_language: str | None = None,
        *,
        debug: bool = False,
    ) -> list[TranslationResult]:
        """
        Prepend '[MOCK] ' to each text to simulate translation.

        Raises:
            MockTranslatorError: If `return_error` was set to True during initialization.

        """
        _ = source_language

        if self.return_error:
            msg = "Mock translator was configured to fail."
            raise MockTranslatorError(msg)

        if not texts:
            return []

        results: list[TranslationResult] = []
        for text in texts:
            body = self._token_pattern.sub("", text).strip() if self.drop_placeholders else text
            results.append(
                TranslationResult(
                    translated_text=f"[MOCK] {body}",
                    tokens_used=len(text),  # Simulate token usage
                ),
            )

        if debug:
            logger.debug(
                "MockTranslator processed %d texts for target '%s'.",
                len(texts),
                target_language,
            )

        return results
