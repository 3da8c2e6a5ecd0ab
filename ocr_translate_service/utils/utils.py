"""Utility helpers for the OCR translate service.

This module centralizes shared behaviors across the API, processor and client
layers: application info, upload content-type resolution and
logging setup.
"""

import logging
import sys

import filetype

from ocr_translate_service.settings import settings

GENERIC_MIME_TYPES = ("", "application/octet-stream")


def get_app_info() -> dict:
    """Return general information about the application.

    Used by the `/api/info` endpoint.

    Returns:
        dict: Application information (name, version, oracle model, target script).
    """
    return {"service_app_name": "ocr-translate-service",
            "service_version": settings.OCR_TRANSLATE_SERVICE_VERSION,
            "service_model": settings.GEMINI_MODEL,
            "target_script": settings.TARGET_SCRIPT}


def detect_file_type(stream: bytes) -> object | None:
    """Guess the file type from the leading bytes of a stream.

    Args:
        stream: Raw bytes to inspect.

    Returns:
        object | None: filetype match object, or None if the type is unknown.
    """
    try:
        return filetype.guess(stream)
    except Exception:
        logging.error("Could not determine file Type")
    return None


def resolve_mime_type(declared_mime_type: str | None, stream: bytes) -> str:
    """Return the declared MIME type, sniffing the content only when the
    declaration is missing or generic.

    A declared type is never overridden, validation is done on what the
    caller claims the file is.

    Args:
        declared_mime_type: Content type sent with the multipart part.
        stream: Raw file bytes.

    Returns:
        str: MIME type to validate and forward to the oracle.
    """
    declared = (declared_mime_type or "").split(";")[0].strip().lower()
    if declared not in GENERIC_MIME_TYPES:
        return declared

    file_type = detect_file_type(stream)
    if file_type is not None:
        return str(file_type.mime)  # type: ignore

    return declared


def setup_logging(component_name: str = "config_logger", log_level: int = 20) -> logging.Logger:
    """Configure a logger that writes to stdout with a consistent format.

    Args:
        component_name: Logger name to configure.
        log_level: Logging level to set on the logger and handler.

    Returns:
        logging.Logger: Configured logger instance.
    """
    root_logger = logging.getLogger(component_name)
    log_format = '[%(asctime)s] [%(levelname)s] %(name)s: %(message)s'
    log_handler = logging.StreamHandler(sys.stdout)
    log_handler.setFormatter(logging.Formatter(fmt=log_format))
    log_handler.setLevel(level=log_level)
    root_logger.setLevel(level=log_level)
    root_logger.propagate = False

    # only add the handler if a previous one does not exists
    handler_exists = False
    for h in root_logger.handlers:
        if isinstance(h, logging.StreamHandler) and h.level is log_handler.level:
            handler_exists = True
            break

    if not handler_exists:
        root_logger.addHandler(log_handler)

    return root_logger
