from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse

from ocr_translate_service.dto.info_response import InfoResponse
from ocr_translate_service.utils.utils import get_app_info

health_api = APIRouter(prefix="/api")


@health_api.get("/health", response_class=ORJSONResponse)
def health() -> ORJSONResponse:
    return ORJSONResponse(content={"status": "healthy"})


@health_api.get("/ready", response_class=ORJSONResponse)
def ready(request: Request) -> ORJSONResponse:
    orchestrator = getattr(request.app.state, "orchestrator", None)

    if orchestrator is None:
        return ORJSONResponse(content={"status": "not_ready", "issues": ["orchestrator_not_initialized"]},
                              status_code=503)

    issues = []
    if not orchestrator.is_configured():
        issues.append("oracle_credential_missing")

    if issues:
        return ORJSONResponse(content={"status": "not_ready", "issues": issues}, status_code=503)

    return ORJSONResponse(content={"status": "ready", "targetScript": orchestrator.profile.name})


@health_api.get("/info", response_model=InfoResponse, response_class=ORJSONResponse)
def info() -> ORJSONResponse:
    return ORJSONResponse(content=get_app_info())
