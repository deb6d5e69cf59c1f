"""Prompt template for translategemma-style translation models."""

import re
from typing import Dict

LANGUAGE_CODES: Dict[str, str] = {
    "English": "en",
    "Simplified Chinese": "zh-CN",
    "Traditional Chinese": "zh-TW",
    "Japanese": "ja",
    "Korean": "ko",
    "French": "fr",
    "German": "de",
    "Spanish": "es",
    "Russian": "ru",
}


def resolve_language_code(language: str) -> str:
    """Map a language name to its code, falling back to a slugged name."""
    code = LANGUAGE_CODES.get(language)
    if code is not None:
        return code
    return re.sub(r"\s+", "-", language.lower())


def build_translation_prompt(
    source_language: str,
    target_language: str,
    text: str,
) -> str:
    source_code = resolve_language_code(source_language)
    target_code = resolve_language_code(target_language)

    return (
        f"You are a professional {source_language} ({source_code}) to "
        f"{target_language} ({target_code}) translator. Your goal is to accurately "
        f"convey the meaning and nuances of the original {source_language} text "
        f"while adhering to {target_language} grammar, vocabulary, and cultural "
        f"sensitivities.\n"
        f"Produce only the {target_language} translation, without any additional "
        f"explanations or commentary. Please translate the following "
        f"{source_language} text into {target_language}:\n\n\n"
        f"{text}"
    )
