import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from ocr_translate_service.app import create_app
from ocr_translate_service.settings import settings

from .utils_helpers import FakeOracle


class TestHealthApi(unittest.TestCase):
    def setUp(self) -> None:
        self.app = create_app(oracle_factory=lambda: FakeOracle())
        self.client = TestClient(self.app)

    def tearDown(self) -> None:
        self.client.close()

    def test_health_returns_healthy(self):
        response = self.client.get("/api/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy"})

    def test_ready_returns_200_when_oracle_is_configured(self):
        response = self.client.get("/api/ready")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ready", "targetScript": "any"})

    def test_ready_returns_503_when_credential_missing(self):
        with TestClient(create_app(oracle_factory=lambda: None)) as client:
            response = client.get("/api/ready")

        self.assertEqual(response.status_code, 503)
        data = response.json()
        self.assertEqual(data.get("status"), "not_ready")
        self.assertIn("oracle_credential_missing", data.get("issues", []))

    def test_ready_returns_503_when_orchestrator_not_initialized(self):
        del self.app.state.orchestrator

        response = self.client.get("/api/ready")

        self.assertEqual(response.status_code, 503)
        self.assertIn("orchestrator_not_initialized", response.json().get("issues", []))

    def test_info(self):
        response = self.client.get("/api/info")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {
            "service_app_name": "ocr-translate-service",
            "service_version": settings.OCR_TRANSLATE_SERVICE_VERSION,
            "service_model": settings.GEMINI_MODEL,
            "target_script": settings.TARGET_SCRIPT,
        })

    def test_index_page(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertIn("text/html", response.headers["content-type"])
        self.assertIn("/api/upload", response.text)


class TestReadinessWithGemini(unittest.TestCase):

    def test_ready_checks_the_credential_without_building_the_oracle(self):
        with patch.object(settings, "GEMINI_API_KEY", "secret"), \
                patch("ocr_translate_service.app.app.build_oracle") as build_oracle:
            with TestClient(create_app()) as client:
                response = client.get("/api/ready")

        self.assertEqual(response.status_code, 200)
        build_oracle.assert_not_called()

    def test_ready_returns_503_without_credential(self):
        with patch.object(settings, "GEMINI_API_KEY", ""), \
                patch("ocr_translate_service.app.app.build_oracle") as build_oracle:
            with TestClient(create_app()) as client:
                response = client.get("/api/ready")

        self.assertEqual(response.status_code, 503)
        self.assertIn("oracle_credential_missing", response.json()["issues"])
        build_oracle.assert_not_called()
