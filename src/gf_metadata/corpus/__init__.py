"""Readers for the files that make up a Google Fonts checkout."""

from .families import FamilyEntry, iter_families, read_family
from .languages import LanguageEntry, iter_languages, read_language
from .tags import Tag, parse_tag_line, read_tags

__all__ = [
    "FamilyEntry",
    "LanguageEntry",
    "Tag",
    "iter_families",
    "iter_languages",
    "parse_tag_line",
    "read_family",
    "read_language",
    "read_tags",
]
