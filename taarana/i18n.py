"""
Bilingual strings (English / Hindi).
"""

from dataclasses import dataclass

from .errors import ValidationError

LANGUAGES = ("en", "hi")
DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True)
class Text:
    en: str
    hi: str

    def get(self, language=DEFAULT_LANGUAGE):
        return self.hi if language == "hi" else self.en


def resolve_language(value):
    """Return a supported language code, defaulting to English."""
    if not value:
        return DEFAULT_LANGUAGE
    language = str(value).strip().lower()
    if language not in LANGUAGES:
        raise ValidationError(f"Unsupported language: {value}")
    return language


def localize(items, language):
    return [item.get(language) for item in items]


DISCLAIMER = Text(
    "Disclaimer: These are general recommendations. Please consult a healthcare professional for proper diagnosis and treatment.",
    "अस्वीकरण: ये सामान्य सिफारिशें हैं। उचित निदान और उपचार के लिए कृपया स्वास्थ्य पेशेवर से परामर्श करें।",
)
