"""Tests for bracket tag repair."""

import pytest

from tagshield.bracket_fix import fix_tag_brackets, has_technical_bracket_tag
from tagshield.types import BracketFixStats


@pytest.mark.parametrize(
    ("translation", "expected", "kind"),
    [
        ("]Color:Red[نص", "[Color:Red]نص", "reversed"),
        ("]Color:Red]نص", "[Color:Red]نص", "mismatched"),
        ("[Color:Red[نص", "[Color:Red]نص", "mismatched"),
        ("Color:Red نص", "[Color:Red] نص", "bare"),
        ("[deR:roloC] نص", "[Color:Red] نص", "reversed"),
    ],
)
def test_key_value_repairs(translation: str, expected: str, kind: str) -> None:
    """Each kind of damage to a key-value tag is repaired and counted."""
    # Act
    result = fix_tag_brackets("[Color:Red]text", translation)
    # Assert
    assert result.text == expected
    assert getattr(result.stats, kind) == 1
    assert result.stats.total == 1


@pytest.mark.parametrize(
    ("translation", "expected", "kind"),
    [
        ("]HP[10 مستعاد", "[HP]10 مستعاد", "reversed"),
        ("[HP[10 مستعاد", "[HP]10 مستعاد", "mismatched"),
        ("HP 10 مستعاد", "[HP]10 مستعاد", "bare"),
        ("[HP] 10 مستعاد", "[HP]10 مستعاد", "mismatched"),
    ],
)
def test_code_number_repairs(translation: str, expected: str, kind: str) -> None:
    """Each kind of damage to a code-number tag is repaired and counted."""
    # Act
    result = fix_tag_brackets("[HP]10 restored", translation)
    # Assert
    assert result.text == expected
    assert getattr(result.stats, kind) == 1


def test_intact_tags_are_untouched() -> None:
    """A translation that already holds every tag is returned unchanged."""
    # Arrange
    translation = "[Color:Red]نص [HP]10"
    # Act
    result = fix_tag_brackets("[Color:Red]text [HP]10", translation)
    # Assert
    assert result.text == translation
    assert result.stats.total == 0


def test_unrecognizable_damage_is_left_alone() -> None:
    """Damage that matches no known form leaves the translation as is."""
    # Act
    result = fix_tag_brackets("[Color:Red]text", "نص فقط")
    # Assert
    assert result.text == "نص فقط"
    assert result.stats.total == 0


def test_described_key_value_tag() -> None:
    """The description of a key-value tag does not prevent repairing its head."""
    # Act
    result = fix_tag_brackets("[Item:Potion] (Heals)", "]Item:Potion[ (Heals)")
    # Assert
    assert result.text == "[Item:Potion] (Heals)"


def test_has_technical_bracket_tag() -> None:
    """Only key-value and code-number bracket tags are detected."""
    # Act & Assert
    assert has_technical_bracket_tag("Use [Key:Value] now")
    assert has_technical_bracket_tag("Heal [HP]5")
    assert not has_technical_bracket_tag("plain [x] text")


def test_stats_reject_unknown_kind() -> None:
    """Recording an unknown repair kind raises ValueError."""
    # Arrange
    stats = BracketFixStats()
    # Act & Assert
    with pytest.raises(ValueError, match="Unknown bracket repair kind"):
        stats.record("sideways")
