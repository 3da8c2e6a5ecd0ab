"""Client-side checks, run before anything is uploaded.

They mirror the server limits so an obviously bad file never leaves the
client; the server still validates on its own.
"""

from ocr_translate_service.client.state import SelectedFile
from ocr_translate_service.utils.utils import resolve_mime_type

ACCEPTED_MIME_TYPES = ("image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp")
MAX_FILE_SIZE = 10 * 1024 * 1024

INVALID_TYPE_MESSAGE = "Please select a valid image file (JPG, PNG, GIF, WEBP)"
TOO_LARGE_MESSAGE = "File size too large. Please select an image under 10MB."
NO_FILE_MESSAGE = "No file selected. Please choose an image file."


class SelectionError(ValueError):
    pass


def validate_selection(name: str,
                       content: bytes | None,
                       mime_type: str | None = None,
                       max_size: int = MAX_FILE_SIZE) -> SelectedFile:
    """Build a SelectedFile or raise SelectionError with the message to show."""
    if content is None:
        raise SelectionError(NO_FILE_MESSAGE)

    # an undeclared type is sniffed from the content
    mime_type = resolve_mime_type(mime_type, content)
    if mime_type not in ACCEPTED_MIME_TYPES:
        raise SelectionError(INVALID_TYPE_MESSAGE)

    if len(content) > max_size:
        raise SelectionError(TOO_LARGE_MESSAGE)

    return SelectedFile(name=name, content=content, mime_type=mime_type)
