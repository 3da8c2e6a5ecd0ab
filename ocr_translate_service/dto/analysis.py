from enum import Enum

from pydantic import BaseModel, Field


class AnalysisLineKind(str, Enum):
    HEADER = "header"
    SOURCE = "source"
    MEANING = "meaning"
    BLANK = "blank"
    OTHER = "other"


class AnalysisLine(BaseModel):
    """One bullet-marked source line and the meaning that follows it, if any."""

    original: str
    transliteration: str = ""
    meaning: str = ""


class AnalysisSection(BaseModel):
    """A `Section N:` / `Stanza N:` block of the detailed analysis."""

    title: str = ""
    lines: list[AnalysisLine] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)
