from pydantic import BaseModel, Field


class UploadedImage(BaseModel):
    """A single uploaded file, held only for the duration of one request."""

    content: bytes = Field(..., repr=False, description="Raw file bytes.")
    mime_type: str = Field("", description="Declared (or sniffed) MIME type.")
    file_name: str = Field("", description="Original file name, if the client sent one.")

    @property
    def size(self) -> int:
        return len(self.content)

    def is_image(self) -> bool:
        return self.mime_type.lower().startswith("image/")
