from ocr_translate_service.api.api import api

__all__ = ["api"]
