"""
Local, translator-free recovery of technical tags.

When a translator deletes markup outright, no placeholder survives for
``restore`` to find. ``restore_locally`` compares the original with the
translation and reinserts each missing tag at the word boundary closest to
its relative position in the original. The position mapping is a linear
interpolation between strings of different lengths: a best-effort fallback,
not an alignment.
"""

import logging
from bisect import bisect_left

import regex

from .patterns import DEFAULT_CATALOG, STRUCTURAL_CATALOG, PatternCatalog
from .placeholders import PlaceholderFormat
from .protection import restore
from .types import CandidateMatch, ProtectedText, RestorePreview

__all__ = [
    "auto_fix",
    "find_missing_tags",
    "has_technical_tags",
    "preview_tag_restore",
    "restore_locally",
    "strip_foreign_tags",
]

logger = logging.getLogger(__name__)

_MULTI_SPACE = regex.compile(r" {2,}")


def has_technical_tags(text: str, *, catalog: PatternCatalog | None = None) -> bool:
    """Check if the catalog finds at least one tag in the text."""
    return bool((catalog if catalog is not None else DEFAULT_CATALOG).scan(text))


def find_missing_tags(original: str, translation: str, *, catalog: PatternCatalog | None = None) -> list[CandidateMatch]:
    """
    Return the tags of the original whose exact text occurs nowhere in the translation.

    The result keeps the order of the tags in the original.
    """
    catalog = catalog if catalog is not None else DEFAULT_CATALOG
    original_tags = catalog.scan(original)
    if not original_tags:
        return []
    return _missing(original_tags, translation, catalog.scan(translation))


def _missing(original_tags: list[CandidateMatch], translation: str, translation_tags: list[CandidateMatch]) -> list[CandidateMatch]:
    """Select the original tags that neither the scan nor a substring search finds in the translation."""
    echoed = {match.text for match in translation_tags}
    return [tag for tag in original_tags if tag.text not in echoed and tag.text not in translation]


def _occurrences(text: str, needle: str) -> list[tuple[int, int]]:
    """Return the spans of every occurrence of a substring."""
    spans = []
    start = text.find(needle)
    while start != -1:
        spans.append((start, start + len(needle)))
        start = text.find(needle, start + 1)
    return spans


def _word_boundaries(text: str, locked: list[tuple[int, int]]) -> list[int]:
    """
    Return the offsets where an insertion cannot split a word.

    A boundary is either end of the text or either side of a whitespace
    character. Offsets strictly inside a locked span are excluded.
    """
    candidates = {0, len(text)}
    for i, char in enumerate(text):
        if char.isspace():
            candidates.add(i)
            candidates.add(i + 1)
    return sorted(b for b in candidates if not any(start < b < end for start, end in locked))


def restore_locally(original: str, translation: str, *, catalog: PatternCatalog | None = None) -> str:
    """
    Reinsert tags of the original that the translation lost.

    Tags already present in the translation are left where they are and are
    never duplicated. Each missing tag is inserted at the first word boundary
    at or after ``position / len(original)`` of the translation's length.
    Tags sharing a boundary keep the order they had in the original.

    Args:
        original: The source text.
        translation: The translated text, possibly missing tags.
        catalog: The tag patterns to apply. Defaults to the built-in catalog.

    Returns:
        The translation with the missing tags inserted, or the translation
        itself when nothing is missing. Applying it twice equals applying it once.

    """
    catalog = catalog if catalog is not None else DEFAULT_CATALOG
    original_tags = catalog.scan(original)
    if not original_tags:
        return translation
    translation_tags = catalog.scan(translation)
    missing = _missing(original_tags, translation, translation_tags)
    if not missing:
        return translation

    present = {tag.text for tag in original_tags} - {tag.text for tag in missing}
    locked = [(m.start, m.end) for m in translation_tags]
    for text in present:
        locked.extend(_occurrences(translation, text))
    boundaries = _word_boundaries(translation, locked)

    insertions: list[tuple[int, int, str]] = []
    for order, tag in enumerate(missing):
        mapped = round(tag.start / len(original) * len(translation))
        offset = boundaries[bisect_left(boundaries, mapped)]
        insertions.append((offset, order, tag.text))
    insertions.sort()

    parts: list[str] = []
    last = 0
    for offset, _, text in insertions:
        parts.append(translation[last:offset])
        parts.append(text)
        last = offset
    parts.append(translation[last:])

    logger.debug("Restored %d missing tag(s) into translation of length %d.", len(missing), len(translation))
    return "".join(parts)


def strip_foreign_tags(original: str, translation: str, *, catalog: PatternCatalog | None = None) -> str:
    """
    Remove tags from the translation that do not exist in the original.

    Catches tags invented by a machine translator. Runs of spaces left behind
    are collapsed and the result is trimmed. Defaults to the structural
    catalog, so prose-like matches (abbreviations, parentheticals) are never
    removed.
    """
    catalog = catalog if catalog is not None else STRUCTURAL_CATALOG
    original_texts = {match.text for match in catalog.scan(original)}
    foreign = [match for match in catalog.scan(translation) if match.text not in original_texts]
    if not foreign:
        return translation

    result = translation
    for match in reversed(foreign):
        result = result[: match.start] + result[match.end :]
    logger.debug("Stripped %d foreign tag(s) from translation.", len(foreign))
    return _MULTI_SPACE.sub(" ", result).strip()


def preview_tag_restore(original: str, translation: str, *, catalog: PatternCatalog | None = None) -> RestorePreview:
    """Return what ``restore_locally`` would change, without applying it."""
    return RestorePreview(before=translation, after=restore_locally(original, translation, catalog=catalog))


def auto_fix(
    original: str,
    translation: str,
    protected: ProtectedText | None = None,
    *,
    catalog: PatternCatalog | None = None,
    placeholder: PlaceholderFormat | None = None,
) -> str:
    """
    Restore placeholders, then recover any tag the translator dropped.

    Args:
        original: The source text.
        translation: The translator output.
        protected: The result of protecting ``original``, when placeholders were sent.
        catalog: The tag patterns to apply.
        placeholder: The placeholder format used when protecting.

    Returns:
        The repaired translation.

    """
    result = translation
    if protected is not None and protected.tags:
        result = restore(result, protected.tags, placeholder=placeholder)
    return restore_locally(original, result, catalog=catalog)
