"""
Google Fonts corpus handle
==========================

``GoogleFonts`` owns a checkout location, an optional family filter and the
in-memory caches built from it. Every cache is filled on first use and kept
for the life of the handle; the filesystem is never re-checked.
"""

import logging
import re
import threading
from pathlib import Path
from typing import TYPE_CHECKING

from .core.config import CorpusConfig
from .core.exceptions import TagLoadError
from .corpus.families import FamilyEntry, iter_families
from .corpus.languages import LanguageEntry, iter_languages
from .corpus.tags import Tag, read_tags
from .schema import FamilyProto, FontProto, LanguageProto
from .selection import DEFAULT_FALLBACK_LANGUAGE, find_language, resolve_primary_language
from .selection import exemplar as select_exemplar

if TYPE_CHECKING:
    from .report import CorpusReport

logger = logging.getLogger(__name__)


class GoogleFonts:
    """Lazily loaded, memoized view of a Google Fonts checkout.

    Family and language listings tolerate bad descriptors: failures are kept
    as entries. Tag loading does not: one bad line makes ``tags()`` raise.
    """

    def __init__(
        self,
        repo_dir: Path,
        family_filter: re.Pattern | None = None,
        *,
        languages_subpath: str = "gflanguages/data/languages",
        tags_subpath: str = "tags/all",
        fallback_language: str = DEFAULT_FALLBACK_LANGUAGE,
        allow_unknown_fields: bool = False,
    ):
        """
        Initialize the handle. Nothing is read until a query needs it.

        Args:
            repo_dir: Root of the checkout
            family_filter: Only load METADATA.pb files whose path matches
            languages_subpath: Path fragment identifying language files
            tags_subpath: Tag directory relative to repo_dir
            fallback_language: Language id used when a family gives no usable hint
            allow_unknown_fields: Skip descriptor fields the schema does not model
        """
        self.repo_dir = Path(repo_dir)
        self.family_filter = family_filter
        self.languages_subpath = languages_subpath
        self.tags_subpath = tags_subpath
        self.fallback_language = fallback_language
        self.allow_unknown_fields = allow_unknown_fields

        self._lock = threading.RLock()
        self._families: list[FamilyEntry] | None = None
        self._languages: list[LanguageEntry] | None = None
        self._parsed_languages: list[LanguageProto] | None = None
        self._font_file_index: dict[str, int] | None = None
        self._tags: list[Tag] | None = None
        self._tags_error: TagLoadError | None = None

    @classmethod
    def from_config(cls, config: CorpusConfig) -> "GoogleFonts":
        """Create a handle from settings."""
        return cls(
            config.repo_dir,
            config.family_filter_pattern(),
            languages_subpath=config.languages_subpath,
            tags_subpath=config.tags_subpath,
            fallback_language=config.fallback_language,
            allow_unknown_fields=config.allow_unknown_fields,
        )

    def families(self) -> list[FamilyEntry]:
        """Every METADATA.pb found, parsed or not, in discovery order."""
        if self._families is None:
            with self._lock:
                if self._families is None:
                    families = list(
                        iter_families(
                            self.repo_dir, self.family_filter, self.allow_unknown_fields
                        )
                    )
                    failed = sum(1 for entry in families if not entry.ok)
                    logger.info(
                        f"Loaded {len(families) - failed}/{len(families)} families "
                        f"from {self.repo_dir}"
                    )
                    self._families = families
        return self._families

    def languages(self) -> list[LanguageEntry]:
        """Every language file found, parsed or not, in discovery order."""
        if self._languages is None:
            with self._lock:
                if self._languages is None:
                    languages = list(
                        iter_languages(
                            self.repo_dir, self.languages_subpath, self.allow_unknown_fields
                        )
                    )
                    failed = sum(1 for entry in languages if not entry.ok)
                    logger.info(
                        f"Loaded {len(languages) - failed}/{len(languages)} languages "
                        f"from {self.repo_dir}"
                    )
                    self._languages = languages
        return self._languages

    def _valid_languages(self) -> list[LanguageProto]:
        if self._parsed_languages is None:
            with self._lock:
                if self._parsed_languages is None:
                    self._parsed_languages = [
                        entry.language for entry in self.languages() if entry.ok
                    ]
        return self._parsed_languages

    def language(self, lang_id: str) -> LanguageProto | None:
        """The successfully parsed language with this id, if any."""
        return find_language(self._valid_languages(), lang_id)

    def tags(self) -> list[Tag]:
        """All tags in the checkout.

        Raises:
            TagLoadError: If loading failed; the same error is raised on every call
        """
        if self._tags is None and self._tags_error is None:
            with self._lock:
                if self._tags is None and self._tags_error is None:
                    try:
                        self._tags = read_tags(self.repo_dir, self.tags_subpath)
                    except TagLoadError as e:
                        logger.error(f"Tag load failed: {e}")
                        self._tags_error = e
        if self._tags_error is not None:
            raise self._tags_error
        return self._tags

    def tags_for_family(self, family_name: str) -> list[Tag]:
        """Tags attached to the named family."""
        return [tag for tag in self.tags() if tag.family == family_name]

    def _family_by_font_file(self) -> dict[str, int]:
        if self._font_file_index is None:
            with self._lock:
                if self._font_file_index is None:
                    index: dict[str, int] = {}
                    for position, entry in enumerate(self.families()):
                        if not entry.ok:
                            continue
                        for font in entry.family.fonts:
                            # Last family to claim a filename wins
                            index[font.filename] = position
                    logger.debug(f"Indexed {len(index)} font files")
                    self._font_file_index = index
        return self._font_file_index

    def family(self, font: FontProto) -> tuple[Path, FamilyProto] | None:
        """The path and family that list this font's filename."""
        position = self._family_by_font_file().get(font.filename)
        if position is None:
            return None
        entry = self.families()[position]
        return entry.path, entry.family

    def family_by_name(self, name: str) -> FamilyProto | None:
        """First successfully parsed family with this name."""
        for entry in self.families():
            if entry.ok and entry.family.name == name:
                return entry.family
        return None

    def find_font_binary(self, font: FontProto) -> Path | None:
        """The font file next to the owning METADATA.pb, if it exists."""
        owner = self.family(font)
        if owner is None:
            return None
        family_path, _ = owner
        font_file = family_path.parent / font.filename
        if not font_file.exists():
            logger.warning(f"No such file as {font_file}")
            return None
        return font_file

    def exemplar(self, family: FamilyProto) -> FontProto | None:
        """The font that best represents the family."""
        return select_exemplar(family)

    def primary_language(self, family: FamilyProto) -> LanguageProto:
        """Our best guess at the primary language for this family.

        Raises:
            PrimaryLanguageUnresolvableError: If not even the fallback language exists
        """
        return resolve_primary_language(family, self._valid_languages(), self.fallback_language)

    def report(self) -> "CorpusReport":
        """Summarize how much of the corpus is usable."""
        from .report import build_report

        return build_report(self)
