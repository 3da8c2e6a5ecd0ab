from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=None, extra="ignore", validate_assignment=True)

    OCR_TRANSLATE_SERVICE_VERSION: str = Field(
        "dev",
        min_length=1,
        validation_alias=AliasChoices("OCR_TRANSLATE_SERVICE_VERSION", "OCR_TRANSLATE_SERVICE_IMAGE_RELEASE_VERSION"),
    )
    OCR_TRANSLATE_SERVICE_LOG_LEVEL: int = Field(20, ge=0, le=50)
    OCR_TRANSLATE_SERVICE_DEBUG_MODE: bool = Field(False)

    OCR_TRANSLATE_SERVICE_PORT: int = Field(8090, ge=1, le=65535)
    OCR_TRANSLATE_SERVICE_WORKERS: int = Field(1, ge=1)

    # oracle credential, read per request, empty means "not configured"
    GEMINI_API_KEY: str = ""
    OCR_TRANSLATE_SERVICE_GEMINI_MODEL: str = Field("gemini-1.5-flash", min_length=1)

    OCR_TRANSLATE_SERVICE_TARGET_SCRIPT: Literal["any", "devanagari"] = Field("any")

    OCR_TRANSLATE_SERVICE_MAX_UPLOAD_BYTES: int = Field(10 * 1024 * 1024, gt=0)

    # the size-limit fault has always been answered with a 500, keep it unless told otherwise
    OCR_TRANSLATE_SERVICE_OVERSIZE_STATUS_CODE: int = Field(500, ge=400, le=599)

    @field_validator("OCR_TRANSLATE_SERVICE_TARGET_SCRIPT", mode="before")
    @classmethod
    def normalize_target_script(cls, value: str) -> str:
        value = str(value).strip().lower()
        # "hindi" is accepted as a shorthand for the devanagari profile
        return "devanagari" if value == "hindi" else value

    @field_validator("GEMINI_API_KEY", mode="before")
    @classmethod
    def strip_api_key(cls, value: str | None) -> str:
        return "" if value is None else str(value).strip()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def LOG_LEVEL(self) -> int:
        # 50 - CRITICAL, 40 - ERROR, 30 - WARNING, 20 - INFO, 10 - DEBUG, 0 - NOTSET
        return self.OCR_TRANSLATE_SERVICE_LOG_LEVEL

    @computed_field  # type: ignore[prop-decorator]
    @property
    def DEBUG_MODE(self) -> bool:
        return self.OCR_TRANSLATE_SERVICE_DEBUG_MODE

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ROOT_DIR(self) -> str:
        return str(Path(__file__).resolve().parents[1])

    @computed_field  # type: ignore[prop-decorator]
    @property
    def STATIC_DIR(self) -> str:
        return str(Path(__file__).resolve().parent / "static")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def GEMINI_MODEL(self) -> str:
        return self.OCR_TRANSLATE_SERVICE_GEMINI_MODEL

    @computed_field  # type: ignore[prop-decorator]
    @property
    def TARGET_SCRIPT(self) -> str:
        return self.OCR_TRANSLATE_SERVICE_TARGET_SCRIPT

    @computed_field  # type: ignore[prop-decorator]
    @property
    def MAX_UPLOAD_BYTES(self) -> int:
        return self.OCR_TRANSLATE_SERVICE_MAX_UPLOAD_BYTES

    @computed_field  # type: ignore[prop-decorator]
    @property
    def OVERSIZE_STATUS_CODE(self) -> int:
        return self.OCR_TRANSLATE_SERVICE_OVERSIZE_STATUS_CODE

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ORACLE_CONFIGURED(self) -> bool:
        return bool(self.GEMINI_API_KEY)


settings = Settings() # type: ignore[call-arg]
