from ocr_translate_service.client.session import ClientSession
from ocr_translate_service.client.state import ClientPhase, ProcessingState, StepStatus

__all__ = ["ClientSession", "ClientPhase", "ProcessingState", "StepStatus"]
