from dataclasses import dataclass, field

from ocr_translate_service.dto.oracle_query import ImagePayload
from ocr_translate_service.oracle.base import VisionOracle

PNG_HEADER = b"\x89PNG\r\n\x1a\n"

SAMPLE_ANSWER = """EXTRACTED_TEXT:
मैं तुम-सबकी ओर निहार रहा हूँ,
कुछ तो कहो कि मैं यहाँ हूँ!

DETECTED_LANGUAGE:
Hindi

LANGUAGE_CODE:
hi

ROMANIZED_TRANSLITERATION:
Main tum-sabakī ora nihāra rahā hūṅ,
Kuch to kaho ki main yahāṅ hūṅ!

ENGLISH_TRANSLATION:
I am gazing towards all of you,
Say something, for I am here!

CONTENT_TYPE:
poem

DETAILED_ANALYSIS:
Stanza 1:
● मैं तुम-सबकी ओर निहार रहा हूँ, (Main tum-sabakī ora nihāra rahā hūṅ,)
○ Meaning: I am gazing towards all of you,

Stanza 2:
● कुछ तो कहो कि मैं यहाँ हूँ! (Kuch to kaho ki main yahāṅ hūṅ!)
○ Meaning: Say something, for I am here!
"""

SAMPLE_FIELDS = {
    "original_text": "मैं तुम-सबकी ओर निहार रहा हूँ,\nकुछ तो कहो कि मैं यहाँ हूँ!",
    "detected_language": "Hindi",
    "language_code": "hi",
    "romanized_text": "Main tum-sabakī ora nihāra rahā hūṅ,\nKuch to kaho ki main yahāṅ hūṅ!",
    "english_translation": "I am gazing towards all of you,\nSay something, for I am here!",
    "content_type": "poem",
    "detailed_analysis": "Stanza 1:\n"
                         "● मैं तुम-सबकी ओर निहार रहा हूँ, (Main tum-sabakī ora nihāra rahā hūṅ,)\n"
                         "○ Meaning: I am gazing towards all of you,\n"
                         "\n"
                         "Stanza 2:\n"
                         "● कुछ तो कहो कि मैं यहाँ हूँ! (Kuch to kaho ki main yahāṅ hūṅ!)\n"
                         "○ Meaning: Say something, for I am here!",
}


def png_bytes(size: int = 1024) -> bytes:
    """PNG signature padded to `size` bytes, enough for content sniffing."""
    return PNG_HEADER + b"\x00" * max(0, size - len(PNG_HEADER))


@dataclass
class FakeOracle(VisionOracle):
    """Deterministic oracle, answers (or raises) from a script in call order."""

    answers: list = field(default_factory=list)
    calls: list[tuple[str, ImagePayload]] = field(default_factory=list)

    def evaluate(self, prompt: str, image: ImagePayload) -> str:
        self.calls.append((prompt, image))
        answer = self.answers.pop(0)
        if isinstance(answer, Exception):
            raise answer
        return answer
