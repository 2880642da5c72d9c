"""
Processing pipeline for TagShield.

This package contains the processors that move entries through the
protect, translate and restore phases.
"""

from .base import Processor
from .protection_processor import ProtectionProcessor
from .restoration_processor import RestorationProcessor
from .translation_processor import TranslationProcessor, create_batches

__all__ = [
    "ProtectionProcessor",
    "Processor",
    "RestorationProcessor",
    "TranslationProcessor",
    "create_batches",
]
