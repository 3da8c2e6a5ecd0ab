from fastapi import APIRouter

from ocr_translate_service.api.health import health_api
from ocr_translate_service.api.ui import ui_api
from ocr_translate_service.api.upload import upload_api

api = APIRouter()

api.include_router(health_api)
api.include_router(upload_api)
api.include_router(ui_api)
