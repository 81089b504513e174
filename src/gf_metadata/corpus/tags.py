"""
Family tags
===========

Tags are numeric annotations stored one per line in ``tags/all/*.csv``::

    Roboto Slab, /quant/stroke_width_min, 26.31
    Roboto Slab, wght@100, /quant/stroke_width_min, 26.31
    Georama, "ital,wght@1,100", /quant/stroke_width_min, 16.97

The format is not quite CSV: fields are trimmed, a field may be wrapped in
double quotes to protect embedded commas, and escaped quotes are not
supported. A line has three fields (family, tag, value) or four (family,
localization key, tag, value).

Unlike family and language loading, a single malformed line fails the whole
tag load.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from gf_metadata.core.config import TAG_FILE_SUFFIX
from gf_metadata.core.exceptions import (
    TagFieldCountError,
    TagLoadError,
    TagParseError,
    TagQuoteError,
    TagValueError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tag:
    """A numeric annotation on a family."""

    family: str
    loc: str
    tag: str
    value: float

    def __str__(self) -> str:
        if self.loc:
            return f"{self.family}, {self.loc}, {self.tag}, {self.value}"
        return f"{self.family}, {self.tag}, {self.value}"


def _unquote(field: str) -> str:
    if len(field) >= 2 and field.startswith('"') and field.endswith('"'):
        return field[1:-1]
    return field


def split_tag_fields(line: str) -> list[str]:
    """Split a tag line into trimmed, unquoted fields.

    A trailing comma does not produce an empty last field, but trailing
    whitespace after a comma does.
    """
    fields = []
    rest = line
    while rest:
        rest = rest.strip()
        search_from = 0
        if rest.startswith('"'):
            close = rest.find('"', 1)
            if close == -1:
                raise TagQuoteError(line)
            search_from = close
        comma = rest.find(",", search_from)
        if comma == -1:
            fields.append(rest)
            rest = ""
        else:
            fields.append(rest[:comma].strip())
            rest = rest[comma + 1 :]
    return [_unquote(field) for field in fields]


def parse_tag_line(line: str) -> Tag:
    """Parse one tag line.

    Raises:
        TagFieldCountError: If the line does not have 3 or 4 fields
        TagValueError: If the value is not a number
        TagQuoteError: If a quoted field is never closed
    """
    fields = split_tag_fields(line)
    if len(fields) == 3:
        family, tag, value = fields
        loc = ""
    elif len(fields) == 4:
        family, loc, tag, value = fields
    else:
        raise TagFieldCountError(line, len(fields))

    # float() also takes digit separators such as 1_000
    if "_" in value:
        raise TagValueError(line, value)
    try:
        number = float(value)
    except ValueError as e:
        raise TagValueError(line, value) from e

    return Tag(family=family, loc=loc, tag=tag, value=number)


def read_tag_file(path: Path) -> list[Tag]:
    """Parse every non-blank line of one tag file."""
    tags = []
    try:
        with open(path, encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                line = line.rstrip("\r\n")
                if not line.strip():
                    continue
                try:
                    tags.append(parse_tag_line(line))
                except TagParseError as e:
                    raise TagLoadError(path, str(e), line_number) from e
    except (OSError, UnicodeDecodeError) as e:
        raise TagLoadError(path, str(e)) from e
    return tags


def read_tags(root: Path, tags_subpath: str = "tags/all") -> list[Tag]:
    """Load every tag under ``root / tags_subpath``.

    Raises:
        TagLoadError: If the directory or a file cannot be read, or any line is malformed
    """
    tag_dir = Path(root) / tags_subpath
    try:
        candidates = sorted(tag_dir.iterdir())
    except OSError as e:
        raise TagLoadError(tag_dir, str(e)) from e

    tags: list[Tag] = []
    for path in candidates:
        if path.suffix != TAG_FILE_SUFFIX or not path.is_file():
            continue
        file_tags = read_tag_file(path)
        logger.debug(f"Read {len(file_tags)} tags from {path}")
        tags.extend(file_tags)

    logger.info(f"Loaded {len(tags)} tags from {tag_dir}")
    return tags
