import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from ocr_translate_service.settings import Settings


class TestSettings(unittest.TestCase):

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Settings()

        self.assertEqual(config.OCR_TRANSLATE_SERVICE_PORT, 8090)
        self.assertEqual(config.TARGET_SCRIPT, "any")
        self.assertEqual(config.MAX_UPLOAD_BYTES, 10 * 1024 * 1024)
        self.assertEqual(config.OVERSIZE_STATUS_CODE, 500)
        self.assertFalse(config.ORACLE_CONFIGURED)

    def test_values_are_read_from_the_environment(self):
        env = {
            "GEMINI_API_KEY": "  secret-key \n",
            "OCR_TRANSLATE_SERVICE_IMAGE_RELEASE_VERSION": "1.2.3",
            "OCR_TRANSLATE_SERVICE_TARGET_SCRIPT": "Hindi",
            "OCR_TRANSLATE_SERVICE_OVERSIZE_STATUS_CODE": "413",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Settings()

        self.assertEqual(config.GEMINI_API_KEY, "secret-key")
        self.assertTrue(config.ORACLE_CONFIGURED)
        self.assertEqual(config.OCR_TRANSLATE_SERVICE_VERSION, "1.2.3")
        self.assertEqual(config.TARGET_SCRIPT, "devanagari")
        self.assertEqual(config.OVERSIZE_STATUS_CODE, 413)

    def test_blank_api_key_is_not_configured(self):
        self.assertFalse(Settings(GEMINI_API_KEY="   ").ORACLE_CONFIGURED)

    def test_unknown_target_script_is_rejected(self):
        with self.assertRaises(ValidationError):
            Settings(OCR_TRANSLATE_SERVICE_TARGET_SCRIPT="cyrillic")

    def test_oversize_status_must_be_an_error_status(self):
        with self.assertRaises(ValidationError):
            Settings(OCR_TRANSLATE_SERVICE_OVERSIZE_STATUS_CODE=200)

    def test_assignment_is_validated(self):
        config = Settings()
        config.OCR_TRANSLATE_SERVICE_TARGET_SCRIPT = "HINDI"
        self.assertEqual(config.TARGET_SCRIPT, "devanagari")

        with self.assertRaises(ValidationError):
            config.OCR_TRANSLATE_SERVICE_MAX_UPLOAD_BYTES = 0
