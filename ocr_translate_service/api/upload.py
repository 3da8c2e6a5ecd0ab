import traceback

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import ORJSONResponse
from starlette.datastructures import UploadFile

from ocr_translate_service.dto.upload_response import AnalysisResponse, ErrorResponse, NoTextResponse
from ocr_translate_service.dto.uploaded_image import UploadedImage
from ocr_translate_service.processor.errors import UploadProcessingError
from ocr_translate_service.processor.orchestrator import Orchestrator
from ocr_translate_service.settings import settings
from ocr_translate_service.utils.utils import resolve_mime_type, setup_logging

upload_api = APIRouter(prefix="/api")

log = setup_logging(component_name="upload_api", log_level=settings.LOG_LEVEL)

UPLOAD_FIELD_NAME = "file"
INTERNAL_ERROR_MESSAGE = "Internal server error. Please try again."


def error_response(message: str, status_code: int) -> ORJSONResponse:
    return ORJSONResponse(content=ErrorResponse(error=message).model_dump(), status_code=status_code)


async def read_upload(request: Request) -> UploadedImage | None:
    form = await request.form()
    file = form.get(UPLOAD_FIELD_NAME)

    if not isinstance(file, UploadFile):
        return None

    content = await file.read()
    await file.close()

    return UploadedImage(content=content,
                         mime_type=resolve_mime_type(file.content_type, content),
                         file_name=file.filename or "")


@upload_api.post("/upload",
                 response_model=NoTextResponse | AnalysisResponse,
                 responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
                 response_class=ORJSONResponse)
async def upload(request: Request) -> ORJSONResponse:
    """
        Accepts one image in the multipart field `file` and returns either the
        short-circuit "no text" payload or the parsed analysis.
    """

    orchestrator: Orchestrator = request.app.state.orchestrator

    try:
        # credential first, the image is not looked at without one
        oracle = orchestrator.get_oracle()

        upload_file = await read_upload(request)
        outcome = await run_in_threadpool(orchestrator.process, upload_file, oracle)

    except UploadProcessingError as exception:
        return error_response(exception.message, exception.status_code)
    except Exception:
        log.error("API Error: " + str(traceback.format_exc()))
        return error_response(INTERNAL_ERROR_MESSAGE, 500)

    return ORJSONResponse(content=outcome.to_json_dict())
