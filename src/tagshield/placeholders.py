"""Placeholder token formats."""

from dataclasses import dataclass
from typing import Final

__all__ = ["DEFAULT_PLACEHOLDER", "PlaceholderFormat"]


@dataclass(frozen=True)
class PlaceholderFormat:
    """
    Renders the placeholder token substituted for a protected tag.

    The token is ``prefix`` + the tag index + ``suffix``. With the default
    ``TAG_`` prefix and no suffix, ``TAG_1`` is a textual prefix of ``TAG_10``;
    a non-empty ``suffix`` removes that ambiguity, and a non-zero ``width``
    (zero-padded index) removes it for up to ``10 ** width`` tags.

    Attributes:
        prefix: Literal text placed before the index.
        width: Minimum number of index digits, zero-padded. 0 means unpadded.
        suffix: Literal text placed after the index.

    """

    prefix: str = "TAG_"
    width: int = 0
    suffix: str = ""

    def __post_init__(self) -> None:
        """Validate attributes."""
        if not self.prefix:
            msg = "The placeholder 'prefix' must not be empty."
            raise ValueError(msg)
        if self.width < 0:
            msg = f"The placeholder 'width' cannot be negative, got {self.width}."
            raise ValueError(msg)
        if self.suffix[:1].isdigit():
            msg = "The placeholder 'suffix' must not start with a digit."
            raise ValueError(msg)

    def render(self, index: int) -> str:
        """Return the token for the tag with the given index."""
        return f"{self.prefix}{str(index).zfill(self.width)}{self.suffix}"

    def is_unambiguous_for(self, count: int) -> bool:
        """Check whether no token among the first `count` indices is a textual prefix of another."""
        if self.suffix:
            return True
        limit = 10 ** max(self.width, 1)
        return count <= limit


DEFAULT_PLACEHOLDER: Final[PlaceholderFormat] = PlaceholderFormat()
