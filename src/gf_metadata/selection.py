"""
Representative choices for a family
===================================

Picks the font that best represents a family (its exemplar) and the language
best suited to render a sample of it.
"""

import logging
from collections.abc import Sequence

from .core.exceptions import PrimaryLanguageUnresolvableError
from .schema import FamilyProto, FontProto, LanguageProto

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_LANGUAGE = "en_Latn"


def exemplar_score(font: FontProto) -> int:
    """Score a font as a candidate to represent its family."""
    score = 0
    # prefer regular
    if font.style == "normal":
        score += 16

    # prefer closer to 400, dividing toward zero
    delta = font.weight - 400
    steps = abs(delta) // 100
    score -= steps if delta >= 0 else -steps

    # prefer variable
    if "]." in font.filename:
        score += 1

    return score


def exemplar(family: FamilyProto) -> FontProto | None:
    """The font that best represents the family, or None if it has no fonts.

    Ties go to the font listed first.
    """
    best = None
    best_score = 0
    for font in family.fonts:
        score = exemplar_score(font)
        if best is None or score > best_score:
            best, best_score = font, score
    return best


def find_language(languages: Sequence[LanguageProto], lang_id: str) -> LanguageProto | None:
    """First language with exactly this id."""
    for language in languages:
        if language.id == lang_id:
            return language
    return None


def most_populous_for_script(
    languages: Sequence[LanguageProto], script: str
) -> LanguageProto | None:
    """The language written in script with the largest population; ties keep the first seen."""
    best = None
    for language in languages:
        if not language.HasField("script") or language.script != script:
            continue
        if best is None or language.population > best.population:
            best = language
    return best


def resolve_primary_language(
    family: FamilyProto,
    languages: Sequence[LanguageProto],
    fallback: str = DEFAULT_FALLBACK_LANGUAGE,
) -> LanguageProto:
    """Our best guess at the primary language for this family.

    Meant to be a good choice for things like rendering a sample string. Tries
    the declared primary language, then the most widely used language in the
    declared primary script, then ``fallback``.

    Raises:
        PrimaryLanguageUnresolvableError: If ``fallback`` is not in ``languages``
    """
    if family.HasField("primary_language"):
        language = find_language(languages, family.primary_language)
        if language is not None:
            return language
        logger.warning(
            f"{family.name} specifies invalid primary_language {family.primary_language}"
        )

    if family.HasField("primary_script"):
        language = most_populous_for_script(languages, family.primary_script)
        if language is not None:
            return language
        logger.warning(
            f"{family.name} specifies a primary_script that matches no languages "
            f"{family.primary_script}"
        )

    language = find_language(languages, fallback)
    if language is None:
        raise PrimaryLanguageUnresolvableError(family.name, fallback)
    return language
