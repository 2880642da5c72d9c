"""TagShield: Protects technical tags in localization strings across machine translation."""

import importlib.metadata

from .bracket_fix import fix_tag_brackets, has_technical_bracket_tag
from .patterns import DEFAULT_CATALOG, STRUCTURAL_CATALOG, PatternCatalog, RegexTagPattern
from .placeholders import DEFAULT_PLACEHOLDER, PlaceholderFormat
from .protection import protect, restore
from .restoration import (
    auto_fix,
    find_missing_tags,
    has_technical_tags,
    preview_tag_restore,
    restore_locally,
    strip_foreign_tags,
)
from .store import entry_key, split_entry_key
from .types import CandidateMatch, ProtectedTag, ProtectedText, RestorePreview


def _get_version() -> str:
    """
    Retrieve the package version from metadata.

    Returns:
        The version string, or a development version if not installed.

    """
    try:
        return importlib.metadata.version("TagShield")
    except importlib.metadata.PackageNotFoundError:
        # Fallback for when the package is not installed, e.g., in a development environment
        return "0.0.0-dev"


__version__ = _get_version()

__all__ = [
    "DEFAULT_CATALOG",
    "DEFAULT_PLACEHOLDER",
    "STRUCTURAL_CATALOG",
    "CandidateMatch",
    "PatternCatalog",
    "PlaceholderFormat",
    "ProtectedTag",
    "ProtectedText",
    "RegexTagPattern",
    "RestorePreview",
    "__version__",
    "auto_fix",
    "entry_key",
    "find_missing_tags",
    "fix_tag_brackets",
    "has_technical_bracket_tag",
    "has_technical_tags",
    "preview_tag_restore",
    "protect",
    "restore",
    "restore_locally",
    "split_entry_key",
    "strip_foreign_tags",
]
