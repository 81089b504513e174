"""Language descriptor discovery and parsing."""

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import NamedTuple

from google.protobuf import text_format

from gf_metadata.core.config import LANGUAGE_FILE_SUFFIX
from gf_metadata.core.exceptions import MetadataParseError
from gf_metadata.schema import LanguageProto

from .walk import walk_files

logger = logging.getLogger(__name__)


class LanguageEntry(NamedTuple):
    """One discovered language file and its parse outcome."""

    path: Path
    language: LanguageProto | None
    error: MetadataParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def read_language(text: str, allow_unknown_fields: bool = False) -> LanguageProto:
    """Parse the text of a gflanguages textproto."""
    language = LanguageProto()
    text_format.Parse(text, language, allow_unknown_field=allow_unknown_fields)
    return language


def _is_language_file(path: Path, subpath: str) -> bool:
    if not path.name.endswith(LANGUAGE_FILE_SUFFIX):
        return False
    try:
        resolved = path.resolve()
    except OSError:
        return False
    return subpath in resolved.as_posix()


def iter_languages(
    root: Path,
    subpath: str = "gflanguages/data/languages",
    allow_unknown_fields: bool = False,
) -> Iterator[LanguageEntry]:
    """Yield an entry for every language textproto under root.

    A file qualifies when its resolved path contains ``subpath`` and its name
    ends in ``.textproto``. Failures are kept as entries.
    """
    for path in walk_files(root):
        if not _is_language_file(path, subpath):
            continue
        try:
            language = read_language(path.read_text(encoding="utf-8"), allow_unknown_fields)
        except (OSError, UnicodeDecodeError, text_format.ParseError) as e:
            logger.warning(f"Language read error {e} at {path}")
            yield LanguageEntry(path, None, MetadataParseError(path, str(e)))
            continue
        yield LanguageEntry(path, language)
