from __future__ import annotations

import google.generativeai as genai

from ocr_translate_service.dto.oracle_query import ImagePayload
from ocr_translate_service.oracle.base import VisionOracle
from ocr_translate_service.processor.errors import OracleError
from ocr_translate_service.settings import Settings, settings
from ocr_translate_service.utils.utils import setup_logging


class GeminiOracle(VisionOracle):
    """Google Gemini vision model behind the oracle interface."""

    def __init__(self, api_key: str, model_name: str = "gemini-1.5-flash") -> None:
        self.log = setup_logging(component_name="oracle", log_level=settings.LOG_LEVEL)
        self.model_name = model_name
        genai.configure(api_key=api_key)
        self.model = genai.GenerativeModel(model_name)

    def evaluate(self, prompt: str, image: ImagePayload) -> str:
        self.log.debug("sending prompt to %s | image: %s, %d bytes", self.model_name, image.mime_type, len(image.data))

        response = self.model.generate_content([prompt, image.as_blob()])

        # `.text` raises ValueError when the candidate was blocked or has no parts
        text = response.text
        if not text or not text.strip():
            raise OracleError("empty answer from " + self.model_name)

        return text


def build_oracle(config: Settings | None = None) -> VisionOracle | None:
    """Return a Gemini oracle, or None when no credential is configured.

    Called once per request, so a missing key is detected per request.
    """
    config = config or settings
    if not config.GEMINI_API_KEY:
        return None
    return GeminiOracle(api_key=config.GEMINI_API_KEY, model_name=config.GEMINI_MODEL)
