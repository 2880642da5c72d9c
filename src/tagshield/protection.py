"""
Tag protection before translation and exact restoration afterwards.

``protect`` swaps every technical tag for a numbered placeholder so that the
translator only ever sees plain prose. ``restore`` puts the tags back,
assuming the translator preserved the placeholders literally. Placeholders
that went missing are skipped; recovering those tags is the job of
``tagshield.restoration.restore_locally``.
"""

import logging

from .patterns import DEFAULT_CATALOG, PatternCatalog
from .placeholders import DEFAULT_PLACEHOLDER, PlaceholderFormat
from .types import ProtectedTag, ProtectedText

__all__ = ["protect", "restore"]

logger = logging.getLogger(__name__)


def protect(
    text: str,
    *,
    catalog: PatternCatalog | None = None,
    placeholder: PlaceholderFormat | None = None,
) -> ProtectedText:
    """
    Replace all technical tags with numbered placeholders.

    Consecutive private-use icons are protected as a single atomic tag.

    Args:
        text: The source text.
        catalog: The tag patterns to apply. Defaults to the built-in catalog.
        placeholder: The placeholder token format. Defaults to ``TAG_<index>``.

    Returns:
        The clean text and the protected tags, ordered by position. A text
        without tags is returned unchanged with an empty tag list.

    """
    catalog = catalog if catalog is not None else DEFAULT_CATALOG
    placeholder = placeholder or DEFAULT_PLACEHOLDER

    matches = catalog.scan(text)
    if not matches:
        return ProtectedText(clean_text=text, tags=[])

    if not placeholder.is_unambiguous_for(len(matches)):
        logger.warning(
            "Protecting %d tags with placeholder prefix '%s'; some tokens are textual prefixes of others and may not restore exactly. Set a placeholder width or suffix.",
            len(matches),
            placeholder.prefix,
        )

    parts: list[str] = []
    tags: list[ProtectedTag] = []
    last_end = 0
    for index, match in enumerate(matches):
        parts.append(text[last_end : match.start])
        parts.append(placeholder.render(index))
        tags.append(ProtectedTag(index=index, original=match.text, position=match.start))
        last_end = match.end
    parts.append(text[last_end:])

    return ProtectedText(clean_text="".join(parts), tags=tags)


def restore(
    translated: str,
    tags: list[ProtectedTag],
    *,
    placeholder: PlaceholderFormat | None = None,
) -> str:
    """
    Replace placeholders in a translation with their original tags.

    Tags are processed from the highest index to the lowest, each replacing
    the first literal occurrence of its placeholder, so ``TAG_10`` is
    consumed before ``TAG_1`` could match inside it. A placeholder missing
    from the translation is skipped silently.

    Args:
        translated: The translated clean text.
        tags: The tags returned by ``protect`` for the same source text.
        placeholder: The placeholder format used by ``protect``.

    Returns:
        The translation with every surviving placeholder restored.

    """
    if not tags:
        return translated

    placeholder = placeholder or DEFAULT_PLACEHOLDER
    result = translated
    for tag in sorted(tags, key=lambda t: t.index, reverse=True):
        token = placeholder.render(tag.index)
        if token not in result:
            logger.debug("Placeholder '%s' not found in translation; tag %r left unrestored.", token, tag.original)
            continue
        result = result.replace(token, tag.original, 1)
    return result
