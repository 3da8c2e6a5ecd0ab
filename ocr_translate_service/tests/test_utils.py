import logging
import unittest

from ocr_translate_service.utils.utils import get_app_info, resolve_mime_type, setup_logging

from .utils_helpers import png_bytes


class TestUtils(unittest.TestCase):

    def test_declared_mime_type_is_normalized(self):
        self.assertEqual(resolve_mime_type("Image/PNG; charset=binary", b""), "image/png")

    def test_declared_mime_type_is_never_overridden(self):
        self.assertEqual(resolve_mime_type("text/plain", png_bytes()), "text/plain")

    def test_missing_or_generic_mime_type_is_sniffed(self):
        self.assertEqual(resolve_mime_type(None, png_bytes()), "image/png")
        self.assertEqual(resolve_mime_type("application/octet-stream", png_bytes()), "image/png")

    def test_unknown_content_keeps_the_declaration(self):
        self.assertEqual(resolve_mime_type("application/octet-stream", b"plain words"), "application/octet-stream")
        self.assertEqual(resolve_mime_type("", b""), "")

    def test_setup_logging_adds_a_single_handler(self):
        first = setup_logging(component_name="test_utils_logger", log_level=logging.DEBUG)
        second = setup_logging(component_name="test_utils_logger", log_level=logging.DEBUG)

        self.assertIs(first, second)
        self.assertEqual(len(second.handlers), 1)
        self.assertEqual(second.level, logging.DEBUG)
        self.assertFalse(second.propagate)

    def test_get_app_info(self):
        info = get_app_info()
        self.assertEqual(info["service_app_name"], "ocr-translate-service")
        self.assertEqual(set(info), {"service_app_name", "service_version", "service_model", "target_script"})
