from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class QueryKind(str, Enum):
    EXISTENCE_CHECK = "existence_check"
    STRUCTURED_EXTRACTION = "structured_extraction"


class ImagePayload(BaseModel):
    """Image part sent alongside a prompt to the oracle.

    The raw bytes are kept here, the oracle client is responsible for the
    text-safe (base64) encoding on the wire.
    """

    model_config = ConfigDict(frozen=True)

    mime_type: str
    data: bytes = Field(..., repr=False)

    def as_blob(self) -> dict[str, str | bytes]:
        return {"mime_type": self.mime_type, "data": self.data}


class OracleQuery(BaseModel):
    """(prompt, image) pair, built fresh for every call."""

    model_config = ConfigDict(frozen=True)

    kind: QueryKind
    prompt: str
    image: ImagePayload
