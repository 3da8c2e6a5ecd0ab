from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class ParsedResult(CamelModel):
    """Structured fields extracted from the oracle's answer.

    Every field is a string, a section the oracle left out is an empty string.
    """

    original_text: str = Field("", description="Text as it appears in the image.")
    detected_language: str = Field("", description="Full name of the detected language.")
    language_code: str = Field("", description="ISO language code.")
    romanized_text: str = Field("", description="Romanized transliteration.")
    english_translation: str = Field("", description="English translation.")
    content_type: str = Field("", description="Content type label (poem, sign, article, ...).")
    detailed_analysis: str = Field("", description="Line-by-line analysis, bullet/circle annotated.")
    full_response: str = Field("", description="Verbatim oracle answer.")


class NoTextResponse(CamelModel):
    """Short-circuit outcome, the existence check found no text."""

    success: Literal[True] = True
    no_text_found: Literal[True] = True
    message: str
    quick_stop: Literal[True] = True


class AnalysisResponse(CamelModel):
    """Full analysis outcome."""

    success: Literal[True] = True
    data: ParsedResult


class ErrorResponse(BaseModel):
    """Uniform error shape for every failed request."""

    error: str
