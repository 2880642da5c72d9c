"""Tests for entry files and store keys."""

import json
from pathlib import Path

import pytest
import yaml

from tagshield.models import TranslationEntry
from tagshield.store import EntryStoreError, entry_key, load_entries, save_entries, split_entry_key

ENTRY_INDEX = 12


def test_entry_key() -> None:
    """Keys join the resource and index with a colon."""
    # Act & Assert
    assert entry_key("system.msbt", ENTRY_INDEX) == "system.msbt:12"


def test_split_entry_key_uses_last_colon() -> None:
    """Resources may contain colons; the index follows the last one."""
    # Act
    resource, index = split_entry_key("pack:menu.msbt:12")
    # Assert
    assert resource == "pack:menu.msbt"
    assert index == ENTRY_INDEX


@pytest.mark.parametrize("key", ["nocolon", ":3", "menu:x", "menu:"])
def test_split_entry_key_invalid(key: str) -> None:
    """Malformed keys raise ValueError."""
    # Act & Assert
    with pytest.raises(ValueError, match="Invalid entry key"):
        split_entry_key(key)


def test_load_json_entries(tmp_path: Path) -> None:
    """Plain strings and mappings are both accepted as entries."""
    # Arrange
    path = tmp_path / "entries.json"
    data = {
        "menu:0": "Press \uE000 to start",
        "menu:1": {"original": "Hello {name}", "translation": "Bonjour {name}"},
    }
    path.write_text(json.dumps(data), encoding="utf-8")
    # Act
    entries = load_entries(path)
    # Assert
    assert [e.key for e in entries] == ["menu:0", "menu:1"]
    assert entries[0].original == "Press \uE000 to start"
    assert entries[0].translation is None
    assert entries[1].translation == "Bonjour {name}"


def test_load_json_with_bom(tmp_path: Path) -> None:
    """A UTF-8 byte order mark does not break JSON loading."""
    # Arrange
    path = tmp_path / "bom.json"
    path.write_bytes(b"\xef\xbb\xbf" + json.dumps({"a:0": "Hi"}).encode("utf-8"))
    # Act
    entries = load_entries(path)
    # Assert
    assert entries[0].original == "Hi"


def test_load_yaml_entries(tmp_path: Path) -> None:
    """YAML files are selected by suffix."""
    # Arrange
    path = tmp_path / "entries.yaml"
    path.write_text("'menu:0':\n  original: 'Gain 5 EXP'\n", encoding="utf-8")
    # Act
    entries = load_entries(path)
    # Assert
    assert entries == [TranslationEntry(key="menu:0", original="Gain 5 EXP")]


@pytest.mark.parametrize(
    "content",
    [
        "[1, 2]",
        '{"menu:0": {"translation": "x"}}',
        '{"menu:0": 5}',
        "{not json",
    ],
)
def test_load_invalid_entries(tmp_path: Path, content: str) -> None:
    """Malformed files raise EntryStoreError naming the file."""
    # Arrange
    path = tmp_path / "broken.json"
    path.write_text(content, encoding="utf-8")
    # Act & Assert
    with pytest.raises(EntryStoreError, match="broken.json"):
        load_entries(path)


def test_load_missing_file(tmp_path: Path) -> None:
    """A missing file raises EntryStoreError."""
    # Act & Assert
    with pytest.raises(EntryStoreError):
        load_entries(tmp_path / "missing.json")


def test_save_json_entries(tmp_path: Path) -> None:
    """Saved JSON keeps non-ASCII text readable and omits absent translations."""
    # Arrange
    path = tmp_path / "out" / "entries.json"
    entries = [
        TranslationEntry(key="menu:0", original="Hello", translation="مرحبا"),
        TranslationEntry(key="menu:1", original="Bye"),
    ]
    # Act
    save_entries(path, entries)
    # Assert
    text = path.read_text(encoding="utf-8")
    assert "مرحبا" in text
    assert json.loads(text) == {
        "menu:0": {"original": "Hello", "translation": "مرحبا"},
        "menu:1": {"original": "Bye"},
    }


def test_save_yaml_entries(tmp_path: Path) -> None:
    """Saved YAML can be loaded back into the same entries."""
    # Arrange
    path = tmp_path / "entries.yml"
    entries = [TranslationEntry(key="menu:0", original="Hi {name}", translation="Salut {name}")]
    # Act
    save_entries(path, entries)
    # Assert
    assert yaml.safe_load(path.read_text(encoding="utf-8")) == {"menu:0": {"original": "Hi {name}", "translation": "Salut {name}"}}
    assert load_entries(path) == entries
