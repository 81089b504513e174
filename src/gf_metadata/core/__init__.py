"""Core components for font metadata handling."""

from .config import CorpusConfig
from .exceptions import (
    ConfigurationError,
    CorpusError,
    GFMetadataError,
    MetadataParseError,
    PrimaryLanguageUnresolvableError,
    ResolutionError,
    TagLoadError,
    TagParseError,
)

__all__ = [
    "ConfigurationError",
    "CorpusConfig",
    "CorpusError",
    "GFMetadataError",
    "MetadataParseError",
    "PrimaryLanguageUnresolvableError",
    "ResolutionError",
    "TagLoadError",
    "TagParseError",
]
