"""Parser for the oracle's labelled plain-text answer.

The answer is a sequence of sections, each introduced by a label at the start
of a line followed by a colon::

    EXTRACTED_TEXT:
    ...
    DETECTED_LANGUAGE:
    ...

The parser walks the recognized labels in the order they appear and tracks
the label it expects next (`SectionLabel.successor`), so an omitted section and
a section out of order are told apart in the `ParseReport`. Neither is an
error: a missing section is an empty string and a displaced one is still
captured.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum

from ocr_translate_service.dto.analysis import AnalysisLine, AnalysisLineKind, AnalysisSection
from ocr_translate_service.dto.upload_response import ParsedResult

log = logging.getLogger("orchestrator")


class SectionLabel(str, Enum):
    EXTRACTED_TEXT = "EXTRACTED_TEXT"
    DETECTED_LANGUAGE = "DETECTED_LANGUAGE"
    LANGUAGE_CODE = "LANGUAGE_CODE"
    ROMANIZED_TRANSLITERATION = "ROMANIZED_TRANSLITERATION"
    ENGLISH_TRANSLATION = "ENGLISH_TRANSLATION"
    CONTENT_TYPE = "CONTENT_TYPE"
    DETAILED_ANALYSIS = "DETAILED_ANALYSIS"

    @property
    def position(self) -> int:
        return list(SectionLabel).index(self)

    @property
    def successor(self) -> SectionLabel | None:
        order = list(SectionLabel)
        return order[self.position + 1] if self.position + 1 < len(order) else None

    @property
    def field_name(self) -> str:
        return LABEL_FIELDS[self]


LABEL_FIELDS: dict[SectionLabel, str] = {
    SectionLabel.EXTRACTED_TEXT: "original_text",
    SectionLabel.DETECTED_LANGUAGE: "detected_language",
    SectionLabel.LANGUAGE_CODE: "language_code",
    SectionLabel.ROMANIZED_TRANSLITERATION: "romanized_text",
    SectionLabel.ENGLISH_TRANSLATION: "english_translation",
    SectionLabel.CONTENT_TYPE: "content_type",
    SectionLabel.DETAILED_ANALYSIS: "detailed_analysis",
}

# markdown decoration around a label (`## LABEL:`, `**LABEL:**`, `- LABEL:`) is part of the label
_LABEL_RE = re.compile(
    r"^[ \t]*(?:(?:[#>*_+-]|\d+[.)])[ \t]*)*"
    r"(" + "|".join(label.value for label in SectionLabel) + r")"
    r"[ \t]*(?:\*\*|__)?[ \t]*:[ \t]*(?:\*\*|__)?",
    re.IGNORECASE | re.MULTILINE,
)

_SECTION_HEADER_RE = re.compile(r"^(?:section|stanza|paragraph|verse)\b.*:\s*$", re.IGNORECASE)
_TRANSLITERATION_RE = re.compile(r"^(?P<original>.*?),?\s*\((?P<transliteration>[^()]*)\)\s*$")
_MEANING_PREFIX_RE = re.compile(r"^meaning\s*:\s*", re.IGNORECASE)

BULLET = "●"
CIRCLE = "○"


@dataclass
class ParseReport:
    """What the state machine saw while walking the labels."""

    found: list[SectionLabel] = field(default_factory=list)
    missing: list[SectionLabel] = field(default_factory=list)
    out_of_order: list[SectionLabel] = field(default_factory=list)
    duplicates: list[SectionLabel] = field(default_factory=list)

    @property
    def well_formed(self) -> bool:
        return not (self.missing or self.out_of_order or self.duplicates)


def parse_response_with_report(raw: str) -> tuple[ParsedResult, ParseReport]:
    """Split a raw answer into the seven labelled fields.

    Args:
        raw: Verbatim oracle answer.

    Returns:
        tuple: the parsed result (with `full_response` set to `raw`) and the
            report describing missing, displaced and repeated labels.
    """
    report = ParseReport()
    values: dict[str, str] = {}

    matches = list(_LABEL_RE.finditer(raw or ""))
    # next label the grammar expects; None once DETAILED_ANALYSIS has been read
    expected: SectionLabel | None = SectionLabel.EXTRACTED_TEXT

    for index, match in enumerate(matches):
        label = SectionLabel(match.group(1).upper())
        end = matches[index + 1].start() if index + 1 < len(matches) else len(raw)

        if label in report.found:
            report.duplicates.append(label)
            continue

        report.found.append(label)
        values[label.field_name] = raw[match.end():end].strip()

        if expected is None or label.position < expected.position:
            # already past this label, keep waiting for the expected one
            report.out_of_order.append(label)
        else:
            # anything between `expected` and `label` was skipped
            expected = label.successor

    report.missing = [label for label in SectionLabel if label not in report.found]

    if not report.well_formed:
        log.warning(
            "oracle answer deviates from the expected format | missing: %s | out of order: %s | duplicates: %s",
            [label.value for label in report.missing],
            [label.value for label in report.out_of_order],
            [label.value for label in report.duplicates],
        )

    return ParsedResult(full_response=raw or "", **values), report


def parse_response(raw: str) -> ParsedResult:
    """Pure raw text -> ParsedResult, never raises on malformed input."""
    result, _ = parse_response_with_report(raw)
    return result


def format_response(result: ParsedResult) -> str:
    """Render a result back into the labelled answer format."""
    blocks = []
    for label in SectionLabel:
        blocks.append(f"{label.value}:\n{getattr(result, label.field_name)}")
    return "\n\n".join(blocks) + "\n"


def classify_analysis_line(line: str) -> AnalysisLineKind:
    stripped = line.strip()
    if not stripped:
        return AnalysisLineKind.BLANK
    if stripped.startswith(BULLET):
        return AnalysisLineKind.SOURCE
    if stripped.startswith(CIRCLE):
        return AnalysisLineKind.MEANING
    if _SECTION_HEADER_RE.match(stripped):
        return AnalysisLineKind.HEADER
    return AnalysisLineKind.OTHER


def parse_detailed_analysis(text: str) -> list[AnalysisSection]:
    """Split the DETAILED_ANALYSIS micro-format into sections and lines.

    `●` lines carry the original text, optionally followed by the
    transliteration in parentheses; the `○ Meaning:` line after one is
    attached to it. Lines before the first header land in an untitled section.
    """
    sections: list[AnalysisSection] = []
    current: AnalysisSection | None = None

    for line in (text or "").splitlines():
        kind = classify_analysis_line(line)
        stripped = line.strip()

        if kind is AnalysisLineKind.BLANK:
            continue

        if kind is AnalysisLineKind.HEADER:
            current = AnalysisSection(title=stripped.rstrip(":").strip())
            sections.append(current)
            continue

        if current is None:
            current = AnalysisSection()
            sections.append(current)

        if kind is AnalysisLineKind.SOURCE:
            body = stripped[len(BULLET):].strip()
            match = _TRANSLITERATION_RE.match(body)
            if match:
                current.lines.append(AnalysisLine(original=match.group("original").strip(),
                                                  transliteration=match.group("transliteration").strip()))
            else:
                current.lines.append(AnalysisLine(original=body))
        elif kind is AnalysisLineKind.MEANING:
            meaning = _MEANING_PREFIX_RE.sub("", stripped[len(CIRCLE):].strip())
            if current.lines and not current.lines[-1].meaning:
                current.lines[-1].meaning = meaning
            else:
                current.notes.append(meaning)
        else:
            current.notes.append(stripped)

    return sections
