"""Plain-text rendering of the client state, used by the command-line client."""

from ocr_translate_service.client.state import (
    SKIPPED_STEP_DESCRIPTION,
    ClientPhase,
    ProcessingState,
    StepStatus,
    step_statuses,
)
from ocr_translate_service.dto.analysis import AnalysisLineKind
from ocr_translate_service.dto.upload_response import ParsedResult
from ocr_translate_service.processor.parser import classify_analysis_line

STEP_MARKERS = {
    StepStatus.PENDING: " ",
    StepStatus.ACTIVE: "…",
    StepStatus.COMPLETED: "✓",
    StepStatus.SKIPPED: "⏭",
}

ANALYSIS_INDENT = {
    AnalysisLineKind.HEADER: "",
    AnalysisLineKind.SOURCE: "   ",
    AnalysisLineKind.MEANING: "      ",
    AnalysisLineKind.OTHER: "",
}


def render_steps(state: ProcessingState) -> list[str]:
    lines = ["Processing Status"]
    for step, status in step_statuses(state):
        description = SKIPPED_STEP_DESCRIPTION if status is StepStatus.SKIPPED else step.description
        lines.append(f" [{STEP_MARKERS[status]}] {step.id}. {step.title} - {description}")
    return lines


def render_detailed_analysis(text: str) -> list[str]:
    lines = []
    for line in text.splitlines():
        kind = classify_analysis_line(line)
        if kind is AnalysisLineKind.BLANK:
            lines.append("")
            continue
        lines.append(ANALYSIS_INDENT[kind] + line.strip())
    return lines


def render_result(result: ParsedResult) -> list[str]:
    lines = ["Processing Complete!", ""]
    lines += [f"Original Text ({result.detected_language or 'unknown'}):", result.original_text, ""]
    lines += ["Romanized Transliteration:", result.romanized_text, ""]
    if result.content_type:
        lines += [f"Content type: {result.content_type}", ""]
    lines += ["Translation:", result.english_translation, ""]
    lines += ["Detailed Analysis:"] + render_detailed_analysis(result.detailed_analysis)
    return lines


def render_state(state: ProcessingState) -> str:
    lines: list[str] = []

    if state.selected_file is not None:
        lines.append(f"Selected: {state.selected_file.name} ({state.selected_file.size_mb})")

    if state.phase.is_processing or (state.phase is ClientPhase.NO_TEXT and state.quick_stop):
        lines += render_steps(state)

    if state.error:
        lines.append(f"Error: {state.error}")

    if state.phase is ClientPhase.NO_TEXT:
        title = "No Readable Text Detected" if state.quick_stop else "Processing Complete - No Readable Text Found"
        lines += [title, state.message or "The uploaded image appears to contain no readable text."]

    if state.phase is ClientPhase.DONE and state.processed_data is not None:
        lines += render_result(state.processed_data)

    return "\n".join(lines)
