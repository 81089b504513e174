"""Google Fonts Metadata
=====================

Index a Google Fonts checkout and answer questions about it: which font best
represents a family, which language to render its sample in, where a font's
binary lives and which numeric tags the families carry.
"""

__version__ = "1.0.0"

from .core.config import CorpusConfig
from .core.exceptions import (
    GFMetadataError,
    MetadataParseError,
    PrimaryLanguageUnresolvableError,
    TagLoadError,
    TagParseError,
)
from .corpus import FamilyEntry, LanguageEntry, Tag, parse_tag_line, read_family, read_language
from .google_fonts import GoogleFonts
from .schema import FamilyProto, FontProto, LanguageProto
from .selection import exemplar, exemplar_score

__all__ = [
    "CorpusConfig",
    "FamilyEntry",
    "FamilyProto",
    "FontProto",
    "GFMetadataError",
    "GoogleFonts",
    "LanguageEntry",
    "LanguageProto",
    "MetadataParseError",
    "PrimaryLanguageUnresolvableError",
    "Tag",
    "TagLoadError",
    "TagParseError",
    "exemplar",
    "exemplar_score",
    "parse_tag_line",
    "read_family",
    "read_language",
]
