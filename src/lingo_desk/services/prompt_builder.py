"""Prompt Builder - provider-agnostic system instruction for translation."""

from lingo_desk.core import Language


DETECTED_LANGUAGE_PHRASE = "the detected language"

DETECTION_INSTRUCTION = (
    'If the source language is specified as "the detected language", '
    "you must first attempt to detect the language of the provided text.\n"
)

RULES = """
Follow these rules strictly:
1.  Your output must ONLY be the translated text. Do not include any preambles, apologies, explanations, or conversational text like "Here is the translation:".
2.  Preserve the original formatting, including line breaks, paragraphs, and spacing.
3.  Identify and preserve proper nouns, brand names, technical terms, and code snippets (e.g., 'PySide6', 'API Key', '`gemini-1.5-pro`'). Do not translate them unless the context absolutely demands it for fluency.
4.  Translate idiomatically, capturing the nuance and intent of the original text, not just a literal word-for-word translation."""


def build_system_prompt(source: Language, target: Language) -> str:
    """
    Build the system instruction for a source -> target translation.

    The same string is sent as the OpenAI "system" message and as the
    Gemini system_instruction.

    Args:
        source: Source language, possibly Auto Detect.
        target: Concrete target language.

    Returns:
        Fixed-template prompt naming the language pair.
    """
    source_name = DETECTED_LANGUAGE_PHRASE if source.is_auto else source.name

    prompt = "You are a professional, expert translator. "
    prompt += f"Your sole purpose is to translate the user's text from {source_name} to {target.name} "
    prompt += "with the highest possible accuracy and fluency.\n"
    if source.is_auto:
        prompt += DETECTION_INSTRUCTION
    prompt += RULES
    return prompt
