from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field

from ocr_translate_service.dto.upload_response import ParsedResult


class ClientPhase(str, Enum):
    IDLE = "idle"
    FILE_SELECTED = "file_selected"
    UPLOADING = "uploading"
    ANIMATING = "animating"
    DONE = "done"
    NO_TEXT = "no_text"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (ClientPhase.DONE, ClientPhase.NO_TEXT, ClientPhase.FAILED)

    @property
    def is_processing(self) -> bool:
        return self in (ClientPhase.UPLOADING, ClientPhase.ANIMATING)


class StepStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ProcessingStep:
    id: int
    title: str
    description: str


# cosmetic, the server does all the work in one request
PROCESSING_STEPS: tuple[ProcessingStep, ...] = (
    ProcessingStep(1, "Analyzing Image", "Detecting language and scanning text..."),
    ProcessingStep(2, "Extracting Text", "Reading text characters..."),
    ProcessingStep(3, "Transliteration", "Converting to Roman script..."),
    ProcessingStep(4, "Translation", "Translating to English..."),
    ProcessingStep(5, "Analysis", "Analyzing content..."),
)

SKIPPED_STEP_DESCRIPTION = "Skipped - No readable text detected"


class SelectedFile(BaseModel):
    name: str
    content: bytes = Field(..., repr=False)
    mime_type: str

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def size_mb(self) -> str:
        return f"{self.size / (1024 * 1024):.2f} MB"


class ProcessingState(BaseModel):
    """Everything the client shows, mutated only by its own request lifecycle."""

    phase: ClientPhase = ClientPhase.IDLE
    current_step: int = Field(0, ge=0, le=len(PROCESSING_STEPS))
    selected_file: SelectedFile | None = None
    processed_data: ParsedResult | None = None
    error: str | None = None
    message: str | None = None
    no_text_found: bool = False
    quick_stop: bool = False

    @property
    def can_submit(self) -> bool:
        return self.selected_file is not None and not self.phase.is_processing


def step_status(state: ProcessingState, step: ProcessingStep) -> StepStatus:
    if state.quick_stop and state.no_text_found and step.id > 1:
        return StepStatus.SKIPPED
    if state.phase in (ClientPhase.DONE, ClientPhase.NO_TEXT):
        return StepStatus.COMPLETED
    if state.current_step == step.id:
        return StepStatus.ACTIVE
    if state.current_step > step.id:
        return StepStatus.COMPLETED
    return StepStatus.PENDING


def step_statuses(state: ProcessingState) -> list[tuple[ProcessingStep, StepStatus]]:
    return [(step, step_status(state, step)) for step in PROCESSING_STEPS]
