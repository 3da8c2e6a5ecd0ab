import unittest
from unittest.mock import MagicMock, patch

from ocr_translate_service.dto.oracle_query import ImagePayload, OracleQuery, QueryKind
from ocr_translate_service.oracle.gemini import GeminiOracle, build_oracle
from ocr_translate_service.processor.errors import OracleError
from ocr_translate_service.settings import Settings

from .utils_helpers import png_bytes


class TestGeminiOracle(unittest.TestCase):

    def setUp(self) -> None:
        patcher = patch("ocr_translate_service.oracle.gemini.genai")
        self.genai = patcher.start()
        self.addCleanup(patcher.stop)
        self.model = self.genai.GenerativeModel.return_value
        self.image = ImagePayload(mime_type="image/png", data=png_bytes())

    def test_prompt_and_inline_image_are_sent(self):
        self.model.generate_content.return_value = MagicMock(text="TEXT_FOUND")
        oracle = GeminiOracle(api_key="secret", model_name="gemini-test")

        answer = oracle.ask(OracleQuery(kind=QueryKind.EXISTENCE_CHECK, prompt="Is there text?", image=self.image))

        self.assertEqual(answer, "TEXT_FOUND")
        self.genai.configure.assert_called_once_with(api_key="secret")
        self.genai.GenerativeModel.assert_called_once_with("gemini-test")
        self.model.generate_content.assert_called_once_with(
            ["Is there text?", {"mime_type": "image/png", "data": self.image.data}])

    def test_empty_answer_is_an_oracle_error(self):
        self.model.generate_content.return_value = MagicMock(text="  \n")
        oracle = GeminiOracle(api_key="secret")

        with self.assertRaises(OracleError):
            oracle.evaluate("Is there text?", self.image)

    def test_build_oracle_without_credential(self):
        self.assertIsNone(build_oracle(Settings(GEMINI_API_KEY="")))
        self.genai.configure.assert_not_called()

    def test_build_oracle_with_credential(self):
        oracle = build_oracle(Settings(GEMINI_API_KEY="secret", OCR_TRANSLATE_SERVICE_GEMINI_MODEL="gemini-other"))

        self.assertIsInstance(oracle, GeminiOracle)
        self.assertEqual(oracle.model_name, "gemini-other")
