"""Family descriptor discovery and parsing.

Finds every ``METADATA.pb`` under a Google Fonts checkout and parses it into a
``FamilyProto``. A descriptor that cannot be read or parsed is kept as an
entry carrying its error, so the rest of the corpus is still loaded.
"""

import logging
import re
from collections.abc import Iterator
from pathlib import Path
from typing import NamedTuple

from google.protobuf import text_format

from gf_metadata.core.config import FAMILY_METADATA_FILENAME
from gf_metadata.core.exceptions import MetadataParseError
from gf_metadata.schema import FamilyProto

from .walk import walk_files

logger = logging.getLogger(__name__)

# Some descriptors carry an undocumented position block the schema lacks
_POSITION_BLOCK = re.compile(r"position\s+\{[^}]*\}", re.MULTILINE)


class FamilyEntry(NamedTuple):
    """One discovered METADATA.pb and its parse outcome."""

    path: Path
    family: FamilyProto | None
    error: MetadataParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def read_family(text: str, allow_unknown_fields: bool = False) -> FamilyProto:
    """Parse the text of a METADATA.pb.

    Raises:
        google.protobuf.text_format.ParseError: If the text is not a valid family
    """
    if "position" in text:
        text = _POSITION_BLOCK.sub("", text)
    family = FamilyProto()
    text_format.Parse(text, family, allow_unknown_field=allow_unknown_fields)
    return family


def load_family(path: Path, allow_unknown_fields: bool = False) -> FamilyEntry:
    """Read and parse one descriptor, capturing any failure in the entry."""
    try:
        text = path.read_text(encoding="utf-8")
        family = read_family(text, allow_unknown_fields)
    except (OSError, UnicodeDecodeError, text_format.ParseError) as e:
        error = MetadataParseError(path, str(e))
        logger.warning(f"Family read error {e} at {path}")
        return FamilyEntry(path, None, error)
    return FamilyEntry(path, family)


def iter_families(
    root: Path,
    family_filter: re.Pattern | None = None,
    allow_unknown_fields: bool = False,
) -> Iterator[FamilyEntry]:
    """Yield an entry for every METADATA.pb under root, in discovery order.

    Args:
        root: Directory to search recursively
        family_filter: Optional pattern the path (as a string) must contain a match for
        allow_unknown_fields: Skip fields the schema does not model instead of failing

    """
    for path in walk_files(root):
        if path.name != FAMILY_METADATA_FILENAME:
            continue
        if family_filter is not None and family_filter.search(str(path)) is None:
            continue
        yield load_family(path, allow_unknown_fields)
