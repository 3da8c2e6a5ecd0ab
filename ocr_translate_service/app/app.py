from fastapi import FastAPI
from fastapi.responses import ORJSONResponse

from ocr_translate_service.api import api
from ocr_translate_service.oracle.gemini import build_oracle
from ocr_translate_service.processor.orchestrator import OracleFactory, Orchestrator
from ocr_translate_service.processor.prompts import get_profile
from ocr_translate_service.settings import settings
from ocr_translate_service.utils.utils import setup_logging


def create_orchestrator(oracle_factory: OracleFactory | None = None) -> Orchestrator:
    """
        :description: Builds the orchestrator from the current settings
        :param oracle_factory: callable returning the oracle for one request, defaults to Gemini
        :return: Orchestrator instance
    """
    # the Gemini factory is only probed through the credential, an injected factory is asked directly
    uses_gemini = oracle_factory is None
    return Orchestrator(oracle_factory=oracle_factory or (lambda: build_oracle(settings)),
                        profile=get_profile(settings.TARGET_SCRIPT),
                        max_upload_bytes=settings.MAX_UPLOAD_BYTES,
                        oversize_status_code=settings.OVERSIZE_STATUS_CODE,
                        credential_check=(lambda: settings.ORACLE_CONFIGURED) if uses_gemini else None)


def create_app(oracle_factory: OracleFactory | None = None) -> FastAPI:
    """
        :description: Creates FastAPI application with API router and the upload orchestrator
        :param oracle_factory: optional oracle factory, used to plug a fake oracle in tests
        :return: FastAPI application instance
    """

    log = setup_logging(component_name="app", log_level=settings.LOG_LEVEL)

    app = FastAPI(title="OCR Translate Service",
                  description="Extracts, transliterates and translates text from images with a vision model",
                  version=settings.OCR_TRANSLATE_SERVICE_VERSION,
                  default_response_class=ORJSONResponse,
                  debug=settings.DEBUG_MODE)
    app.include_router(api)

    app.state.orchestrator = create_orchestrator(oracle_factory)

    if not settings.ORACLE_CONFIGURED and oracle_factory is None:
        # not fatal, every upload answers with a configuration error until the key is set
        log.warning("GEMINI_API_KEY is not set, uploads will fail until it is configured")

    log.info("target script profile: " + app.state.orchestrator.profile.name)

    return app
