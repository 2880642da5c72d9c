"""
Entry files and store keys.

Translations are kept in a flat key-value store keyed by
``"{resource}:{index}"``. On disk an entry file is a JSON or YAML mapping::

    {"system.msbt:0": {"original": "Press \\ue000 to confirm", "translation": "..."}}
"""

import json
import logging
from pathlib import Path

import yaml

from tagshield.models import TranslationEntry

__all__ = ["EntryStoreError", "entry_key", "load_entries", "save_entries", "split_entry_key"]

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = (".yaml", ".yml")


class EntryStoreError(Exception):
    """Raised when an entry file cannot be read, parsed or written."""


def entry_key(resource: str, index: int) -> str:
    """Build the store key of an entry."""
    return f"{resource}:{index}"


def split_entry_key(key: str) -> tuple[str, int]:
    """
    Split a store key into its resource and entry index.

    The index is taken after the last colon, so resources may contain colons.

    Raises:
        ValueError: If the key has no colon or a non-numeric index.

    """
    resource, sep, index = key.rpartition(":")
    if not sep or not resource or not index.isdigit():
        msg = f"Invalid entry key: '{key}'"
        raise ValueError(msg)
    return resource, int(index)


def _parse_entries(data: object, path: Path) -> list[TranslationEntry]:
    if not isinstance(data, dict):
        msg = f"Entry file {path} must contain a mapping of keys to entries."
        raise EntryStoreError(msg)

    entries: list[TranslationEntry] = []
    for key, value in data.items():
        if isinstance(value, str):
            entries.append(TranslationEntry(key=str(key), original=value))
            continue
        if not isinstance(value, dict) or not isinstance(value.get("original"), str):
            msg = f"Entry '{key}' in {path} needs a string 'original' field."
            raise EntryStoreError(msg)
        translation = value.get("translation")
        entries.append(
            TranslationEntry(
                key=str(key),
                original=value["original"],
                translation=str(translation) if translation is not None else None,
            ),
        )
    return entries


def load_entries(path: str | Path) -> list[TranslationEntry]:
    """
    Load entries from a JSON or YAML file.

    A value may be a plain string (the original, untranslated) or a mapping
    with ``original`` and optional ``translation``.

    Raises:
        EntryStoreError: If the file cannot be read or has an invalid structure.

    """
    path = Path(path)
    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            with path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        else:
            # Binary mode lets json.load handle a UTF-8 BOM.
            with path.open("rb") as f:
                data = json.load(f)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        msg = f"Could not read entry file {path}: {e}"
        raise EntryStoreError(msg) from e

    entries = _parse_entries(data or {}, path)
    logger.debug("Loaded %d entries from %s.", len(entries), path)
    return entries


def save_entries(path: str | Path, entries: list[TranslationEntry]) -> None:
    """
    Write entries to a JSON or YAML file, chosen by the file suffix.

    Raises:
        EntryStoreError: If the file cannot be written.

    """
    path = Path(path)
    data = {entry.key: entry.to_dict() for entry in entries}
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            if path.suffix.lower() in _YAML_SUFFIXES:
                yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)
            else:
                json.dump(data, f, ensure_ascii=False, indent=4)
    except OSError as e:
        msg = f"Could not write entry file {path}: {e}"
        raise EntryStoreError(msg) from e
    logger.info("Wrote %d entries to %s", len(entries), path)
