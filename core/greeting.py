# =============================================================================
# core/greeting.py  —  Greeting Logic
# =============================================================================
#
# Builds the text returned by the say_hello tool.  Pure function, no I/O.
#
# FALLBACK RULE:
#   The MCP schema only lets "japanese" and "english" through, but this
#   function is also called directly (tests, other callers).  Anything that
#   is not a known language, including None, gets the Japanese greeting.
# =============================================================================

from core.models import DEFAULT_LANGUAGE, LANGUAGES


_TEMPLATES: dict[str, str] = {
    "japanese": "こんにちは、{name}さん！",
    "english": "Hello, {name}!",
}


def resolve_language(language: str | None) -> str:
    """Return `language` if it is supported, otherwise the default."""
    if language in LANGUAGES:
        return language
    return DEFAULT_LANGUAGE


def greet(name: str, language: str | None = None) -> str:
    """Greet `name` in the selected language.

    Args:
        name: The person to greet.  Used verbatim.
        language: "japanese" (default) or "english".

    Returns:
        A single line of text, e.g. "Hello, Alice!".
    """
    return _TEMPLATES[resolve_language(language)].format(name=name)
