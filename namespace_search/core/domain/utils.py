"""Text helpers shared across layers.

User input arrives from browsers, terminals and environment files. BOM
markers and replacement characters are stripped at the boundary so the
embedding service and the logs never see them.
"""


def clean_text(text: str | None) -> str:
    """Remove BOM markers and replacement characters.

    Args:
        text: Input text that may contain BOM or replacement characters.

    Returns:
        Cleaned text, or an empty string for ``None``/empty input.
    """
    if not text:
        return ""
    return text.replace("\ufeff", "").replace("\ufffd", "")


def is_blank(value: str | None) -> bool:
    """True when ``value`` is None, empty or whitespace only."""
    return not value or not value.strip()
