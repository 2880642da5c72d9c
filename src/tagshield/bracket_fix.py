"""
Repair of broken brackets around bracket tags.

Translators, and right-to-left rendering in particular, tend to mangle the
brackets of ``[Key:Value]`` and ``[CODE]N`` tags: reversing them, mismatching
them or dropping them. ``fix_tag_brackets`` looks for the damaged forms of
each bracket tag of the original that the translation no longer contains and
rewrites them. Brackets are only ever touched as part of a successful repair;
anything that cannot be matched with confidence is left as it is.
"""

import logging
from collections.abc import Iterable

import regex

from .types import BracketFixResult, BracketFixStats

__all__ = ["fix_tag_brackets", "has_technical_bracket_tag"]

logger = logging.getLogger(__name__)

_KEY_VALUE_TAG = regex.compile(r"\[\w+:[^\]]*?\s*\](?:\s*\([^)]{1,100}\))?")
_KEY_VALUE_HEAD = regex.compile(r"\[\w+:[^\]]*?\s*\]")
_CODE_NUMBER_TAG = regex.compile(r"\[[A-Z]{2,10}\]\d+")
_CODE_NUMBER_PARTS = regex.compile(r"^\[([A-Z]{2,10})\](\d+)$")


def has_technical_bracket_tag(text: str) -> bool:
    """Check if the text contains a ``[Key:Value]`` or ``[CODE]N`` tag."""
    return bool(_KEY_VALUE_HEAD.search(text) or _CODE_NUMBER_TAG.search(text))


def _replace_first(candidates: Iterable[str], text: str, replacement: str) -> str | None:
    """Replace the first match of the first matching pattern, or return None."""
    for pattern in candidates:
        compiled = regex.compile(pattern)
        if compiled.search(text):
            return compiled.sub(lambda _m: replacement, text, count=1)
    return None


def _fix_key_value_tag(tag: str, text: str, stats: BracketFixStats) -> str:
    inner = tag[1 : tag.index("]")]
    esc = regex.escape(inner)
    repaired = f"[{inner}]"
    esc_reversed = regex.escape(inner[::-1])

    attempts = [
        ("reversed", [rf"\]\s*{esc}\s*\["]),
        ("mismatched", [rf"\]\s*{esc}\s*\]", rf"\[\s*{esc}\s*\["]),
        ("bare", [rf"(?<!\[){esc}(?!\])"]),
        # Inner text flipped by bidirectional rendering.
        ("reversed", [rf"\[\s*{esc_reversed}\s*\]", rf"\]\s*{esc_reversed}\s*\["]),
    ]
    for kind, patterns in attempts:
        result = _replace_first(patterns, text, repaired)
        if result is not None:
            stats.record(kind)
            return result
    return text


def _fix_code_number_tag(tag: str, text: str, stats: BracketFixStats) -> str:
    parts = _CODE_NUMBER_PARTS.match(tag)
    if not parts:
        return text
    name, number = (regex.escape(p) for p in parts.groups())

    attempts = [
        ("reversed", [rf"\]{name}\[{number}"]),
        ("mismatched", [rf"\[{name}\[{number}", rf"\]{name}\]{number}"]),
        ("bare", [rf"(?<!\[){name}(?!\])\s*{number}"]),
        ("mismatched", [rf"\[{name}\]\s+{number}"]),
    ]
    for kind, patterns in attempts:
        result = _replace_first(patterns, text, tag)
        if result is not None:
            stats.record(kind)
            return result
    return text


def fix_tag_brackets(original: str, translation: str) -> BracketFixResult:
    """
    Repair damaged brackets of the original's bracket tags in the translation.

    Tags whose exact text already occurs in the translation are skipped.

    Args:
        original: The source text.
        translation: The translated text.

    Returns:
        The repaired text and counts of repairs by kind. When nothing could
        be repaired, the text is the unchanged translation.

    """
    stats = BracketFixStats()
    result = translation

    for tag in (m.group(0) for m in _KEY_VALUE_TAG.finditer(original)):
        if tag not in result:
            result = _fix_key_value_tag(tag, result, stats)

    for tag in (m.group(0) for m in _CODE_NUMBER_TAG.finditer(original)):
        if tag not in result:
            result = _fix_code_number_tag(tag, result, stats)

    if stats.total:
        logger.debug("Repaired %d bracket tag(s): %s", stats.total, stats)
    return BracketFixResult(text=result, stats=stats)
