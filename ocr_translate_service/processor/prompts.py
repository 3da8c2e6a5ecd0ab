"""Prompts sent to the oracle, grouped per target script.

The `any` profile accepts text in any language, the `devanagari` profile only
accepts Hindi written in Devanagari and asks for an answer tailored to it.
Both profiles share the same labelled answer format, so one parser handles
both.
"""

from dataclasses import dataclass

ANSWER_FORMAT = """
EXTRACTED_TEXT:
[{extracted_text_hint}]

DETECTED_LANGUAGE:
[{language_hint}]

LANGUAGE_CODE:
[{language_code_hint}]

ROMANIZED_TRANSLITERATION:
[{transliteration_hint}]

ENGLISH_TRANSLATION:
[{translation_hint}]

CONTENT_TYPE:
[Specify what type of content this is: poem, story, article, sign, book page, handwritten note, etc.]

DETAILED_ANALYSIS:
For each stanza/paragraph/section, follow this EXACT format with proper grouping:

Section 1:
● [Original text line], ([Transliteration/romanization if applicable])
○ Meaning: [English meaning of this line]
● [Next original text line], ([Transliteration/romanization if applicable])
○ Meaning: [English meaning of this line]

Section 2:
● [Original text line], ([Transliteration/romanization if applicable])
○ Meaning: [English meaning of this line]

[Continue this pattern for all sections]

Example format:
Stanza 1:
● मैं तुम-सबकी ओर निहार रहा हूँ, (Main tum-sabakī ora nihāra rahā hūṅ,)
○ Meaning: I am gazing towards all of you,
● स्थान मुझे भी दो तुम अपने बीच; (Sthāna mujhe bhī dō tum apanē bīch;)
○ Meaning: Give me a place too, amongst yourselves;

Stanza 2:
● कुछ तो कहो कि मैं यहाँ हूँ! (Kuch to kaho ki main yahāṅ hūṅ!)
○ Meaning: Say something, for I am here!

CRITICAL FORMATTING RULES:
- Use exactly ● (bullet) for original text lines with transliteration/romanization in parentheses (if applicable)
- Use exactly ○ (circle) for meanings that start with "Meaning:"
- Group lines by section with clear "Section X:" headers
- Analyze every single line of each section
- If it's poetry, use "Stanza" instead of "Section"
- If it's prose, treat each paragraph as a section
- Maintain consistent spacing and formatting throughout
- Do not use any other bullet or numbering styles
- For languages already in Latin script, you may omit transliteration in parentheses
"""


@dataclass(frozen=True)
class ScriptProfile:
    name: str
    positive_token: str
    negative_token: str
    quick_check_prompt: str
    detailed_prompt: str
    no_text_message: str

    def is_negative(self, answer: str) -> bool:
        return self.negative_token in answer


ANY_LANGUAGE = ScriptProfile(
    name="any",
    positive_token="TEXT_FOUND",
    negative_token="NO_TEXT",
    quick_check_prompt="""
Look at this image and determine if there is any readable text present in any language.

Respond with ONLY:
- "TEXT_FOUND" if you see any readable text in any language
- "NO_TEXT" if there's no readable text or the image is not clear enough

Be quick and decisive - just look for any text characters, letters, or script symbols.
""",
    detailed_prompt=(
        "You are an expert multilingual OCR and translation specialist. "
        "Please analyze this image and provide a structured response.\n\n"
        "Since text has been detected, provide your response in this EXACT format:\n"
        + ANSWER_FORMAT.format(
            extracted_text_hint="Write the complete text exactly as it appears in the image, "
                                "preserving all formatting and line breaks",
            language_hint='Full name of the detected language (e.g., "Hindi", "Spanish", "Arabic", '
                          '"Chinese", "English", etc.)',
            language_code_hint='ISO language code (e.g., "hi" for Hindi, "es" for Spanish, "ar" for Arabic, '
                               '"zh" for Chinese, "en" for English, etc.)',
            transliteration_hint="If the detected language uses a non-Latin script, provide romanized "
                                 "transliteration using standard romanization. If already in Latin script, "
                                 'write "N/A - Already in Latin script"',
            translation_hint="Provide a complete English translation of the text. If the text is already "
                             'in English, write "N/A - Original text is in English"',
        )
        + "\nBe accurate and thorough in your analysis. "
          "Make sure to format everything clearly under the specified sections.\n"
    ),
    no_text_message="No readable text was detected in the image. "
                    "Please try with a clearer image containing text.",
)

DEVANAGARI = ScriptProfile(
    name="devanagari",
    positive_token="HINDI_TEXT_FOUND",
    negative_token="NO_HINDI_TEXT",
    quick_check_prompt="""
Look at this image and determine if there is any readable Hindi text written in Devanagari script.

Respond with ONLY:
- "HINDI_TEXT_FOUND" if you see readable Hindi text in Devanagari script
- "NO_HINDI_TEXT" if there's no Hindi text, the text is in another script, or the image is not clear enough

Be quick and decisive - just look for Devanagari characters.
""",
    detailed_prompt=(
        "You are an expert Hindi OCR and translation specialist. "
        "Please analyze this image and provide a structured response.\n\n"
        "Since Hindi text has been detected, provide your response in this EXACT format:\n"
        + ANSWER_FORMAT.format(
            extracted_text_hint="Write the complete Hindi text exactly as it appears in Devanagari, "
                                "preserving all formatting and line breaks",
            language_hint='Write "Hindi"',
            language_code_hint='Write "hi"',
            transliteration_hint="Provide the romanized transliteration (IAST) of the Hindi text",
            translation_hint="Provide a complete English translation of the Hindi text",
        )
        + "\nBe accurate and thorough in your analysis. "
          "Make sure to format everything clearly under the specified sections.\n"
    ),
    no_text_message="No readable Hindi text was detected in the image. "
                    "Please try with a clearer image containing Hindi text.",
)

PROFILES: dict[str, ScriptProfile] = {profile.name: profile for profile in (ANY_LANGUAGE, DEVANAGARI)}


def get_profile(name: str) -> ScriptProfile:
    try:
        return PROFILES[name.lower()]
    except KeyError:
        raise ValueError(f"unknown target script: {name!r}, expected one of {sorted(PROFILES)}") from None
