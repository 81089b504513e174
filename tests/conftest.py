"""
Pytest configuration and fixtures for font metadata tests.
"""

import shutil
import tempfile
from pathlib import Path

import pytest

from gf_metadata.google_fonts import GoogleFonts
from gf_metadata.schema import FamilyProto, FontProto, LanguageProto

DATA_DIR = Path(__file__).parent / "data"

LANGUAGES_SUBPATH = Path("lang/Lib/gflanguages/data/languages")

TAG_LINES = [
    "Roboto Slab, /quant/stroke_width_min, 26.31",
    "Roboto Slab, wght@100, /quant/stroke_width_min, 26.31",
    'Georama, "ital,wght@1,100", /quant/stroke_width_min, 16.97',
    "Roboto, /Expressive/Calm, 80",
]


@pytest.fixture
def testdata_file_content():
    """Read a file from tests/data."""

    def _read(name: str) -> str:
        return (DATA_DIR / name).read_text(encoding="utf-8")

    return _read


@pytest.fixture
def make_font():
    """Build a font record, leaving unset fields at their defaults."""

    def _make(filename: str, style: str | None = None, weight: int | None = None) -> FontProto:
        font = FontProto(filename=filename)
        if style is not None:
            font.style = style
        if weight is not None:
            font.weight = weight
        return font

    return _make


@pytest.fixture
def make_family():
    """Build a family record."""

    def _make(name: str, fonts=(), primary_language=None, primary_script=None) -> FamilyProto:
        family = FamilyProto(name=name)
        family.fonts.extend(fonts)
        if primary_language is not None:
            family.primary_language = primary_language
        if primary_script is not None:
            family.primary_script = primary_script
        return family

    return _make


@pytest.fixture
def make_language():
    """Build a language record."""

    def _make(lang_id: str, script: str | None = None, population: int = 0) -> LanguageProto:
        language = LanguageProto(id=lang_id, population=population)
        if script is not None:
            language.script = script
        return language

    return _make


@pytest.fixture
def temp_dir():
    """Create temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


def _add_family(root: Path, directory: str, metadata: str, binaries: list[str]) -> Path:
    family_dir = root / "ofl" / directory
    family_dir.mkdir(parents=True)
    shutil.copy(DATA_DIR / metadata, family_dir / "METADATA.pb")
    for binary in binaries:
        (family_dir / binary).write_bytes(b"\x00\x01\x00\x00")
    return family_dir / "METADATA.pb"


@pytest.fixture
def corpus_root(temp_dir):
    """A small Google Fonts checkout.

    Layout (discovery order)::

        lang/Lib/gflanguages/data/languages/  en_Latn fr_Latn ja_Jpan ryu_Jpan xx_Broken
        ofl/brokensans/       unparseable METADATA.pb
        ofl/kosugimaru/       primary_language "Invalid", primary_script "Jpan"
        ofl/roboto/           italic binary missing
        ofl/wixmadefortext/   has a position block
        tags/all/families.csv
    """
    root = temp_dir / "fonts"

    _add_family(root, "brokensans", "broken-metadata.pb", ["BrokenSans-Regular.ttf"])
    _add_family(root, "kosugimaru", "kosugimaru-metadata.pb", ["KosugiMaru-Regular.ttf"])
    _add_family(
        root, "roboto", "roboto-metadata.pb", ["Roboto-Regular.ttf", "Roboto[wdth,wght].ttf"]
    )
    _add_family(
        root,
        "wixmadefortext",
        "wixmadefortext-metadata.pb",
        ["WixMadeforText[wght].ttf", "WixMadeforText-Italic[wght].ttf"],
    )

    languages_dir = root / LANGUAGES_SUBPATH
    languages_dir.mkdir(parents=True)
    for language_file in sorted((DATA_DIR / "languages").iterdir()):
        shutil.copy(language_file, languages_dir / language_file.name)
    (languages_dir / "README.md").write_text("Not a language\n")
    # Right suffix, wrong place
    (root / "lang" / "stray.textproto").write_text('id: "zz_Zzzz"\n')

    tags_dir = root / "tags" / "all"
    tags_dir.mkdir(parents=True)
    (tags_dir / "families.csv").write_text("\n".join(TAG_LINES) + "\n")
    (tags_dir / "notes.txt").write_text("not, a, tag, file, at all\n")

    return root


@pytest.fixture
def google_fonts(corpus_root):
    """Handle over the sample checkout."""
    return GoogleFonts(corpus_root)
