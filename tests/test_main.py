"""Tests for the main CLI entry point."""

import json
import unittest
from argparse import Namespace
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from tagshield.__main__ import _load_config, _parse_args, main
from tagshield.config import TagShieldConfig


class TestParseArgs(unittest.TestCase):
    """Test suite for CLI argument parsing."""

    def test_parse_args_protect(self) -> None:
        """1. Protect: Parses the text argument, flags default to False."""
        args = _parse_args(["protect", "Hello {name}"])
        assert isinstance(args, Namespace)
        assert args.command == "protect"
        assert args.text == "Hello {name}"
        assert args.debug is False

    def test_parse_args_file_command(self) -> None:
        """2. File Commands: Parses the file, output, config and debug options."""
        args = _parse_args(["--debug", "repair", "entries.json", "-o", "out.json", "--config", "cfg.yaml"])
        assert args.command == "repair"
        assert args.file == "entries.json"
        assert args.output == "out.json"
        assert args.config == "cfg.yaml"
        assert args.debug is True

    def test_parse_args_no_command(self) -> None:
        """3. No Command: Prints help and exits with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            _parse_args([])
        assert exc_info.value.code == 1

    def test_parse_args_restore_requires_tags(self) -> None:
        """4. Restore: The --tags option is required."""
        with pytest.raises(SystemExit):
            _parse_args(["restore", "Bonjour TAG_0"])


class TestLoadConfig(unittest.TestCase):
    """Test suite for the CLI configuration loader."""

    def test_default_config(self) -> None:
        """1. Defaults: No path yields the built-in configuration."""
        assert _load_config(None) == TagShieldConfig()

    @patch("tagshield.__main__.load_config", side_effect=FileNotFoundError("missing"))
    def test_missing_config(self, _mock_load: MagicMock) -> None:
        """2. Missing: A missing file is logged and None returned."""
        with self.assertLogs("tagshield.__main__", level="ERROR"):
            assert _load_config("missing.yaml") is None

    @patch("tagshield.__main__.load_config", side_effect=ValueError("bad"))
    def test_invalid_config(self, _mock_load: MagicMock) -> None:
        """3. Invalid: An invalid file is logged and None returned."""
        with self.assertLogs("tagshield.__main__", level="ERROR"):
            assert _load_config("bad.yaml") is None


@pytest.fixture(autouse=True)
def no_logging_setup() -> Iterator[MagicMock]:
    """Keep main() from replacing the test session's logging handlers."""
    with patch("tagshield.__main__.setup_logging") as mock_setup:
        yield mock_setup


def test_main_protect(capsys: pytest.CaptureFixture[str]) -> None:
    """The protect command prints the clean text and the tag list."""
    # Act
    main(["protect", "Hello {name}"])
    # Assert
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Hello TAG_0"
    assert json.loads(lines[1]) == [{"index": 0, "original": "{name}", "position": 6}]


def test_main_restore(capsys: pytest.CaptureFixture[str]) -> None:
    """The restore command puts the tags back into the text."""
    # Arrange
    tags = json.dumps([{"index": 0, "original": "{name}", "position": 6}])
    # Act
    main(["restore", "Bonjour TAG_0", "--tags", tags])
    # Assert
    assert capsys.readouterr().out == "Bonjour {name}\n"


def test_main_restore_invalid_tags() -> None:
    """Invalid tag JSON exits with status 1."""
    # Act & Assert
    with pytest.raises(SystemExit) as exc_info:
        main(["restore", "Bonjour TAG_0", "--tags", "not json"])
    assert exc_info.value.code == 1


def test_main_recover(capsys: pytest.CaptureFixture[str]) -> None:
    """The recover command prints the locally restored translation."""
    # Act
    main(["recover", "{a} hello {b}", "{a} bonjour"])
    # Assert
    assert capsys.readouterr().out == "{a} bonjour{b}\n"


def test_main_repair_in_place(tmp_path: Path) -> None:
    """The repair command rewrites the entry file with repaired translations."""
    # Arrange
    path = tmp_path / "entries.json"
    path.write_text(json.dumps({"menu:0": {"original": "[Color:Red]Danger", "translation": "]Color:Red[خطر"}}), encoding="utf-8")
    # Act
    main(["repair", str(path)])
    # Assert
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["menu:0"]["translation"] == "[Color:Red]خطر"


def test_main_translate_to_output(tmp_path: Path) -> None:
    """The translate command writes translations to the output file."""
    # Arrange
    path = tmp_path / "entries.json"
    output = tmp_path / "out.json"
    path.write_text(json.dumps({"menu:0": "Hello {name}"}), encoding="utf-8")
    # Act
    main(["translate", str(path), "--output", str(output)])
    # Assert
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["menu:0"] == {"original": "Hello {name}", "translation": "[MOCK] Hello {name}"}
    assert json.loads(path.read_text(encoding="utf-8")) == {"menu:0": "Hello {name}"}


def test_main_unknown_translator(tmp_path: Path) -> None:
    """An unknown translator name aborts with status 1."""
    # Arrange
    config = tmp_path / "config.yaml"
    config.write_text("translator: 'nonexistent'\n", encoding="utf-8")
    path = tmp_path / "entries.json"
    path.write_text("{}", encoding="utf-8")
    # Act & Assert
    with pytest.raises(SystemExit) as exc_info:
        main(["translate", str(path), "--config", str(config)])
    assert exc_info.value.code == 1


def test_main_missing_entry_file(tmp_path: Path) -> None:
    """A missing entry file aborts with status 1."""
    # Act & Assert
    with pytest.raises(SystemExit) as exc_info:
        main(["repair", str(tmp_path / "missing.json")])
    assert exc_info.value.code == 1


def test_main_missing_config_file(tmp_path: Path) -> None:
    """A missing configuration file aborts with status 1."""
    # Act & Assert
    with pytest.raises(SystemExit) as exc_info:
        main(["repair", str(tmp_path / "entries.json"), "--config", str(tmp_path / "missing.yaml")])
    assert exc_info.value.code == 1


@patch("tagshield.__main__.run_entries", side_effect=RuntimeError("boom"))
def test_main_unexpected_error(_mock_run: MagicMock, tmp_path: Path) -> None:
    """Unexpected errors are logged and exit with status 1."""
    # Arrange
    path = tmp_path / "entries.json"
    path.write_text("{}", encoding="utf-8")
    # Act & Assert
    with pytest.raises(SystemExit) as exc_info:
        main(["repair", str(path)])
    assert exc_info.value.code == 1
