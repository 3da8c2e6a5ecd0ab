import os

from fastapi import APIRouter
from fastapi.responses import FileResponse

from ocr_translate_service.settings import settings

ui_api = APIRouter()

INDEX_PAGE = "index.html"


@ui_api.get("/", include_in_schema=False)
def index() -> FileResponse:
    return FileResponse(os.path.join(settings.STATIC_DIR, INDEX_PAGE), media_type="text/html")
