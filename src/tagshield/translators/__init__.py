"""
Translation boundary implementations.

Each translator adheres to the `BaseTranslator` interface and is selected by
name from the configuration.
"""

from .base import BaseTranslator
from .mock_translator import MockTranslator, MockTranslatorError

# Central mapping from translator name to translator class.
TRANSLATOR_MAPPING: dict[str, type[BaseTranslator]] = {
    "mock": MockTranslator,
}


def get_translator(name: str) -> BaseTranslator | None:
    """Instantiate the translator registered under the given name, or None if unknown."""
    translator_class = TRANSLATOR_MAPPING.get(name)
    return translator_class() if translator_class else None


__all__ = [
    "TRANSLATOR_MAPPING",
    "BaseTranslator",
    "MockTranslator",
    "MockTranslatorError",
    "get_translator",
]
