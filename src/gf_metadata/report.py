"""Corpus health report."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from .selection import exemplar

if TYPE_CHECKING:
    from .google_fonts import GoogleFonts

logger = logging.getLogger(__name__)


class FamilyProblem(BaseModel):
    """Why a METADATA.pb is not usable."""

    path: Path
    reason: str


class CorpusReport(BaseModel):
    """Counts of usable and unusable descriptors."""

    metadata_success: int = Field(0, ge=0, description="Families with a usable exemplar binary")
    metadata_fail: int = Field(0, ge=0, description="Families that failed at any stage")
    lang_success: int = Field(0, ge=0, description="Language files parsed")
    lang_fail: int = Field(0, ge=0, description="Language files that failed to parse")
    problems: list[FamilyProblem] = Field(default_factory=list)

    @property
    def metadata_total(self) -> int:
        return self.metadata_success + self.metadata_fail

    @property
    def lang_total(self) -> int:
        return self.lang_success + self.lang_fail

    def summary_lines(self) -> list[str]:
        return [
            f"Read {self.metadata_success}/{self.metadata_total} METADATA.pb files successfully",
            f"Read {self.lang_success}/{self.lang_total} language files successfully",
        ]


def build_report(gf: "GoogleFonts") -> CorpusReport:
    """Check every family for a parse, an exemplar and an exemplar binary."""
    report = CorpusReport()

    for entry in gf.families():
        if not entry.ok:
            report.problems.append(FamilyProblem(path=entry.path, reason=str(entry.error)))
            report.metadata_fail += 1
            continue
        font = exemplar(entry.family)
        if font is None:
            logger.warning(f"No exemplar for {entry.family.name} from {entry.path}")
            report.problems.append(FamilyProblem(path=entry.path, reason="No exemplar"))
            report.metadata_fail += 1
            continue
        if gf.find_font_binary(font) is None:
            logger.warning(f"No font binary for {font.filename} from {entry.path}")
            report.problems.append(
                FamilyProblem(path=entry.path, reason=f"No font binary for {font.filename}")
            )
            report.metadata_fail += 1
            continue
        report.metadata_success += 1

    for entry in gf.languages():
        if entry.ok:
            report.lang_success += 1
        else:
            report.lang_fail += 1

    return report
