"""Defines the base class for all translators."""

from abc import ABC, abstractmethod

from tagshield.types import TranslationResult


class BaseTranslator(ABC):
    """
    Abstract base class for the translation boundary.

    Implementations are treated as untrusted: they may return texts with
    placeholders or tags silently removed.
    """

    @abstractmethod
    def translate(
        self,
        texts: list[str],
        target_language: str,
        source_language: str | None = None,
        *,
        debug: bool = False,
    ) -> list[TranslationResult]:
        """
        Translate a list of texts.

        Args:
            texts: A list of strings to be translated.
            target_language: The target language code.
            source_language: The source language code (optional).
            debug: If True, enables debug logging.

        Returns:
            A list of TranslationResult objects, one per input text.

        """
        raise NotImplementedError
