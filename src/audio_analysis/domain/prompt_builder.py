"""Instruction text sent to the model alongside the audio."""

ANALYSIS_PROMPT = """Analyze the provided audio file and perform the following tasks:

1. Identify the primary language spoken.
2. Generate a full transcript (subtitles) of the audio in its original language.
3. Transliterate the full transcript into English characters (Latin script), preserving pronunciation rather than meaning. For example, Hindi "नमस्ते" becomes "Namaste".
4. Create a concise summary of the audio in its original language.
5. Create a concise summary of the audio in English.
6. Translate the entire full transcript into English.

Return the result as a single JSON object with exactly the following structure. If the identified language is already English, the "englishTranslation" field must be an exact copy of the "nativeSubtitles" field.
{
  "identifiedLanguage": "The name of the language identified",
  "nativeSubtitles": "The full transcript in the native language...",
  "englishTransliteration": "The transliterated transcript in English characters...",
  "nativeSummary": "The summary in the native language...",
  "englishSummary": "The summary in English...",
  "englishTranslation": "The full transcript translated into English..."
}

Important: Return ONLY the JSON object. Do not add any other text, and do not wrap it in code fences or markdown formatting."""


def build_analysis_prompt() -> str:
    """Returns the fixed analysis instruction."""
    return ANALYSIS_PROMPT
