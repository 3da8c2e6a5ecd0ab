from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import httpx
from pydantic import ValidationError

from ocr_translate_service.client.state import PROCESSING_STEPS, ClientPhase, ProcessingState
from ocr_translate_service.client.validation import SelectionError, validate_selection
from ocr_translate_service.dto.upload_response import ParsedResult
from ocr_translate_service.settings import settings
from ocr_translate_service.utils.utils import setup_logging

UPLOAD_ENDPOINT = "/api/upload"

STEP_PAUSE = 0.6
QUICK_STOP_PAUSE = 1.2

NO_FILE_SELECTED_MESSAGE = "Please select an image file first"
UPLOAD_FAILED_MESSAGE = "Upload failed"
GENERIC_ERROR_MESSAGE = "Error processing image. Please try again."

StateObserver = Callable[[ProcessingState], Any]


class UploadFailed(Exception):
    pass


class ClientSession:
    """Drives one user's select -> upload -> progress -> result flow.

    Every transition goes through `_apply`, which refuses changes coming from
    a submission that a later selection (or removal) has superseded, so a
    cancelled animation never touches the state again.
    """

    def __init__(self,
                 base_url: str = "http://localhost:8090",
                 http_client: httpx.AsyncClient | None = None,
                 step_pause: float = STEP_PAUSE,
                 quick_stop_pause: float = QUICK_STOP_PAUSE,
                 endpoint: str = UPLOAD_ENDPOINT) -> None:
        self.log = setup_logging(component_name="client", log_level=settings.LOG_LEVEL)
        self.http_client = http_client or httpx.AsyncClient(base_url=base_url, timeout=None)
        self._owns_client = http_client is None
        self.step_pause = step_pause
        self.quick_stop_pause = quick_stop_pause
        self.endpoint = endpoint

        self.state = ProcessingState()
        self._observers: list[StateObserver] = []
        self._generation = 0
        self._task: asyncio.Task | None = None

    async def __aenter__(self) -> ClientSession:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.http_client.aclose()

    def subscribe(self, observer: StateObserver) -> None:
        self._observers.append(observer)

    def _apply(self, generation: int, **changes: Any) -> bool:
        if generation != self._generation:
            return False
        self.state = self.state.model_copy(update=changes)
        for observer in self._observers:
            observer(self.state)
        return True

    def _supersede(self) -> int:
        """Invalidate any running submission and cancel its pending pauses."""
        self._generation += 1
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        return self._generation

    def select_file(self, name: str, content: bytes | None, mime_type: str | None = None) -> bool:
        try:
            selected = validate_selection(name, content, mime_type)
        except SelectionError as exception:
            self.log.info("rejected selection %r: %s", name, exception)
            self._apply(self._generation, error=str(exception))
            return False

        generation = self._supersede()
        self._apply(generation, **self._reset_fields(), phase=ClientPhase.FILE_SELECTED, selected_file=selected)
        return True

    def remove_file(self) -> None:
        generation = self._supersede()
        self._apply(generation, **self._reset_fields(), phase=ClientPhase.IDLE, selected_file=None)

    @staticmethod
    def _reset_fields() -> dict[str, Any]:
        return {"current_step": 0, "processed_data": None, "error": None, "message": None,
                "no_text_found": False, "quick_stop": False}

    async def submit(self) -> ProcessingState:
        """Upload the selected file and play the progress steps.

        Returns the state reached, which is the one at the time of
        cancellation if a new selection superseded this submission.
        """
        if self.state.selected_file is None:
            self._apply(self._generation, error=NO_FILE_SELECTED_MESSAGE)
            return self.state

        if self.state.phase.is_processing:
            self.log.info("upload already in progress, submit ignored")
            return self.state

        generation = self._generation
        # set before the task starts so a second submit sees the upload in progress
        self._apply(generation, **self._reset_fields(), phase=ClientPhase.UPLOADING)
        # the steps run in their own task so a new selection can cancel them
        self._task = asyncio.ensure_future(self._run(generation))

        try:
            await self._task
        except asyncio.CancelledError:
            if generation == self._generation:
                raise
            self.log.debug("submission superseded, progress animation cancelled")
        finally:
            if generation == self._generation:
                self._task = None

        return self.state

    async def _run(self, generation: int) -> None:
        selected = self.state.selected_file
        if selected is None:
            return

        self._apply(generation, current_step=1)

        try:
            payload = await self._post(selected.name, selected.content, selected.mime_type)
        except (httpx.HTTPError, UploadFailed) as exception:
            self.log.error("upload failed: %s", exception)
            message = str(exception) if isinstance(exception, UploadFailed) else GENERIC_ERROR_MESSAGE
            self._apply(generation, phase=ClientPhase.FAILED, error=message or GENERIC_ERROR_MESSAGE,
                        current_step=0, processed_data=None)
            return

        if payload.get("quickStop") and payload.get("noTextFound"):
            # keep "Analyzing Image" on screen for a moment before stopping
            await asyncio.sleep(self.quick_stop_pause)
            self._apply(generation, phase=ClientPhase.NO_TEXT, quick_stop=True, no_text_found=True,
                        message=payload.get("message"), current_step=0)
            return

        await self._animate(generation)

        if payload.get("noTextFound"):
            self._apply(generation, phase=ClientPhase.NO_TEXT, no_text_found=True,
                        message=payload.get("message"), current_step=0)
            return

        try:
            data = ParsedResult.model_validate(payload.get("data") or {})
        except ValidationError:
            self.log.error("unexpected response payload: %r", payload)
            self._apply(generation, phase=ClientPhase.FAILED, error=GENERIC_ERROR_MESSAGE,
                        current_step=0, processed_data=None)
            return

        self._apply(generation, phase=ClientPhase.DONE, processed_data=data, current_step=0)

    async def _animate(self, generation: int) -> None:
        for step in PROCESSING_STEPS[1:]:
            if not self._apply(generation, phase=ClientPhase.ANIMATING, current_step=step.id):
                return
            await asyncio.sleep(self.step_pause)

    async def _post(self, name: str, content: bytes, mime_type: str) -> dict[str, Any]:
        response = await self.http_client.post(self.endpoint, files={"file": (name, content, mime_type)})

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not response.is_success:
            error = payload.get("error") if isinstance(payload, dict) else None
            raise UploadFailed(error or UPLOAD_FAILED_MESSAGE)

        if not isinstance(payload, dict):
            raise UploadFailed(GENERIC_ERROR_MESSAGE)

        return payload
