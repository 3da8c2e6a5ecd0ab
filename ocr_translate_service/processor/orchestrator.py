from __future__ import annotations

import time
import traceback
from collections.abc import Callable

from ocr_translate_service.dto.oracle_query import ImagePayload, OracleQuery, QueryKind
from ocr_translate_service.dto.upload_response import AnalysisResponse, NoTextResponse
from ocr_translate_service.dto.uploaded_image import UploadedImage
from ocr_translate_service.oracle.base import VisionOracle
from ocr_translate_service.processor.errors import (
    ConfigurationError,
    InvalidUploadError,
    OracleError,
    UploadTooLargeError,
)
from ocr_translate_service.processor.parser import parse_response_with_report
from ocr_translate_service.processor.prompts import ANY_LANGUAGE, ScriptProfile
from ocr_translate_service.settings import settings
from ocr_translate_service.utils.utils import setup_logging

OracleFactory = Callable[[], VisionOracle | None]

DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024


class Orchestrator:
    """Runs one upload through the quick check and, if text was found, the
    structured extraction.

    The orchestrator keeps no per-request state, a single instance serves
    every request of the app.
    """

    def __init__(self,
                 oracle_factory: OracleFactory,
                 profile: ScriptProfile = ANY_LANGUAGE,
                 max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
                 oversize_status_code: int = UploadTooLargeError.status_code,
                 credential_check: Callable[[], bool] | None = None):
        self.log = setup_logging(component_name="orchestrator", log_level=settings.LOG_LEVEL)
        self.oracle_factory = oracle_factory
        self.profile = profile
        self.max_upload_bytes = max_upload_bytes
        self.oversize_status_code = oversize_status_code
        self.credential_check = credential_check

    def get_oracle(self) -> VisionOracle:
        """
            :description: Builds the oracle for the current request
            :raises ConfigurationError: when no credential is configured
            :return: oracle instance
        """
        oracle = self.oracle_factory()
        if oracle is None:
            self.log.error("GEMINI_API_KEY not configured")
            raise ConfigurationError()
        return oracle

    def is_configured(self) -> bool:
        """Whether an oracle can be built, without building one when a credential check is set."""
        if self.credential_check is not None:
            return self.credential_check()
        return self.oracle_factory() is not None

    def validate(self, upload: UploadedImage | None) -> UploadedImage:
        if upload is None or (not upload.content and not upload.file_name):
            raise InvalidUploadError("No file uploaded")

        if not upload.is_image():
            self.log.info("rejected upload %r with content type %r", upload.file_name, upload.mime_type)
            raise InvalidUploadError()

        if upload.size > self.max_upload_bytes:
            self.log.info("rejected upload %r, %d bytes over the limit of %d",
                          upload.file_name, upload.size, self.max_upload_bytes)
            raise UploadTooLargeError(status_code=self.oversize_status_code)

        return upload

    def build_queries(self, upload: UploadedImage) -> tuple[OracleQuery, OracleQuery]:
        image = ImagePayload(mime_type=upload.mime_type, data=upload.content)
        quick_check = OracleQuery(kind=QueryKind.EXISTENCE_CHECK,
                                  prompt=self.profile.quick_check_prompt,
                                  image=image)
        extraction = OracleQuery(kind=QueryKind.STRUCTURED_EXTRACTION,
                                 prompt=self.profile.detailed_prompt,
                                 image=image)
        return quick_check, extraction

    def _ask(self, oracle: VisionOracle, query: OracleQuery) -> str:
        try:
            return oracle.ask(query)
        except Exception as exception:
            self.log.error("oracle call " + query.kind.value + " failed: " + str(traceback.format_exc()))
            raise OracleError() from exception

    def process(self, upload: UploadedImage | None,
                oracle: VisionOracle | None = None) -> NoTextResponse | AnalysisResponse:
        """ Validates the upload and asks the oracle about it, one call if the
        quick check finds no text, two otherwise.

        Args:
            upload (UploadedImage | None): _description_ . the uploaded file, None if the form had no file
            oracle (VisionOracle | None): _description_ . oracle already built for this request, if any

        Raises:
            UploadProcessingError: _description_ . configuration, validation or oracle fault

        Returns:
            NoTextResponse | AnalysisResponse: _description_ . short-circuit or full analysis
        """

        if oracle is None:
            oracle = self.get_oracle()
        upload = self.validate(upload)

        self.log.info("Starting OCR and AI analysis of " + str(upload.file_name) + " | "
                      + upload.mime_type + " | " + str(upload.size) + " bytes | profile: " + self.profile.name)
        start_time = time.time()

        quick_check, extraction = self.build_queries(upload)

        quick_check_answer = self._ask(oracle, quick_check).strip()
        self.log.info("Quick check result: " + quick_check_answer)

        if self.profile.is_negative(quick_check_answer):
            self.log.info("No readable text detected, skipping the detailed analysis | Elapsed : "
                          + str(round(time.time() - start_time, 4)) + " seconds")
            return NoTextResponse(message=self.profile.no_text_message)

        answer = self._ask(oracle, extraction)
        result, report = parse_response_with_report(answer)

        self.log.info("AI analysis completed | sections found: " + str(len(report.found))
                      + " | Elapsed : " + str(round(time.time() - start_time, 4)) + " seconds")

        return AnalysisResponse(data=result)
