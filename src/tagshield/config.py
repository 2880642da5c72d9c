"""Handles the parsing and validation of the TagShield configuration file."""

import logging
from pathlib import Path
from typing import Any

import regex
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .patterns import DEFAULT_CATALOG, PatternCatalog, RegexTagPattern
from .placeholders import PlaceholderFormat

logger = logging.getLogger(__name__)


class PlaceholderSettings(BaseModel):
    """Settings for the placeholder token format."""

    prefix: str = Field(default="TAG_", min_length=1)
    width: int = Field(default=0, ge=0)
    suffix: str = ""


class PatternSettings(BaseModel):
    """A user-defined tag pattern appended to the built-in catalog."""

    name: str = Field(min_length=1)
    regex: str

    @field_validator("regex")
    @classmethod
    def _validate_regex(cls, value: str) -> str:
        try:
            regex.compile(value)
        except regex.error as e:
            msg = f"Invalid regex pattern '{value}': {e}"
            raise ValueError(msg) from e
        return value


class CatalogSettings(BaseModel):
    """Settings that adapt the built-in pattern catalog to a text source."""

    extra_abbreviations: list[str] = Field(default_factory=list)
    disabled_patterns: list[str] = Field(default_factory=list)
    extra_patterns: list[PatternSettings] = Field(default_factory=list)


class PipelineSettings(BaseModel):
    """Settings for the batch translation pipeline."""

    batch_size: int = Field(default=20, ge=1)
    fix_brackets: bool = True
    strip_foreign: bool = False


class TagShieldConfig(BaseModel):
    """The root configuration for TagShield."""

    placeholder: PlaceholderSettings = Field(default_factory=PlaceholderSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    pipeline: PipelineSettings = Field(default_factory=PipelineSettings)
    translator: str = "mock"
    source_lang: str = "en"
    target_lang: str = "ar"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TagShieldConfig":
        """
        Create a TagShieldConfig object from a dictionary.

        Raises:
            ValueError: If the configuration is invalid.

        """
        try:
            config = cls(**data)
        except ValidationError as e:
            msg = f"Invalid or missing configuration: {e}"
            raise ValueError(msg) from e
        # Build once so unknown pattern names and bad placeholders fail at load time.
        config.build_catalog()
        config.build_placeholder()
        return config

    def build_catalog(self) -> PatternCatalog:
        """Build the pattern catalog described by the catalog settings."""
        catalog = DEFAULT_CATALOG
        if self.catalog.disabled_patterns:
            catalog = catalog.without(*self.catalog.disabled_patterns)
        catalog = catalog.with_abbreviations(self.catalog.extra_abbreviations)
        if self.catalog.extra_patterns:
            catalog = catalog.extend(*(RegexTagPattern(p.name, p.regex) for p in self.catalog.extra_patterns))
        return catalog

    def build_placeholder(self) -> PlaceholderFormat:
        """Build the placeholder format described by the placeholder settings."""
        return PlaceholderFormat(prefix=self.placeholder.prefix, width=self.placeholder.width, suffix=self.placeholder.suffix)


class StrictSingleQuoteLoader(yaml.SafeLoader):
    """
    A custom YAML loader that enforces the use of single quotes for all strings.

    Double-quoted YAML strings interpret backslash escapes, which silently
    corrupts regex patterns; single quotes keep them verbatim.
    """


def _construct_scalar(loader: StrictSingleQuoteLoader, node: yaml.ScalarNode) -> Any:  # noqa: ANN401
    """Construct a scalar node, but first check its style."""
    if node.style == '"':
        line = node.start_mark.line + 1
        col = node.start_mark.column + 1
        msg = f"Double-quoted string found at line {line}, column {col}. Please use single quotes (') instead."
        raise yaml.YAMLError(msg)
    return loader.construct_scalar(node)


StrictSingleQuoteLoader.add_constructor("tag:yaml.org,2002:str", _construct_scalar)


def load_config(config_path: str | Path) -> TagShieldConfig:
    """
    Load, parse, and validate the YAML configuration file.

    Args:
        config_path: The path to the configuration file.

    Returns:
        A validated TagShieldConfig object.

    Raises:
        FileNotFoundError: If the config file does not exist.
        yaml.YAMLError: If there is a syntax error in the YAML file.
        ValueError: If the configuration is invalid.

    """
    path = Path(config_path)
    if not path.is_file():
        msg = f"Configuration file not found at: {config_path}"
        raise FileNotFoundError(msg)

    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.load(f, Loader=StrictSingleQuoteLoader)  # noqa: S506

        if data is None:
            data = {}
        if not isinstance(data, dict):
            msg = "Config file must be a YAML mapping (dictionary)."
            raise TypeError(msg)

        config = TagShieldConfig.from_dict(data)
    except yaml.YAMLError as e:
        msg = f"Error parsing YAML config file: {e}"
        raise yaml.YAMLError(msg) from e
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        msg = f"Invalid or missing configuration: {e}"
        raise ValueError(msg) from e
    else:
        logger.debug("Loaded configuration from %s", path)
        return config
