"""Render search matches as HTML fragments for the search page."""

import html
from typing import Any
from urllib.parse import urlsplit

from ..domain import Match

TEXT_TEMPLATE = '<div class="text-lg font-semibold mb-2">{}</div>'
TITLE_TEMPLATE = '<div class="text-sm text-gray-400 mb-2">Title: {}</div>'
URL_TEMPLATE = (
    '<div class="text-sm text-blue-400 mb-2">'
    '<a href="{0}" target="_blank" rel="noopener noreferrer">{0}</a></div>'
)
URL_TEXT_TEMPLATE = '<div class="text-sm text-blue-400 mb-2">{}</div>'
SOURCE_TEMPLATE = '<div class="text-sm text-gray-500 mb-2">Source: {}</div>'
RELEVANCE_TEMPLATE = '<div class="text-xs text-gray-600">Relevance Score: {}</div>'

LINK_SCHEMES = frozenset({"http", "https"})

# Order in which metadata fields appear in a result
FIELD_TEMPLATES: tuple[tuple[str, str], ...] = (
    ("text", TEXT_TEMPLATE),
    ("title", TITLE_TEMPLATE),
    ("url", URL_TEMPLATE),
    ("source", SOURCE_TEMPLATE),
)


def format_relevance(score: float | None) -> str:
    """Format a similarity score as a percentage with one decimal, e.g. ``87.3%``."""
    return f"{(score or 0.0) * 100:.1f}%"


def _render_value(value: Any, escape: bool) -> str:
    text = value if isinstance(value, str) else str(value)
    return html.escape(text, quote=True) if escape else text


def _is_web_link(value: Any) -> bool:
    try:
        scheme = urlsplit(str(value).strip()).scheme
    except ValueError:
        return False
    return scheme.lower() in LINK_SCHEMES


def _template_for(key: str, template: str, value: Any, escape: bool) -> str:
    # Only http(s) urls become links when escaping is on
    if key == "url" and escape and not _is_web_link(value):
        return URL_TEXT_TEMPLATE
    return template


def format_match(match: Match, *, escape: bool = True) -> str:
    """Build the HTML fragment for one match.

    Present metadata fields are emitted in a fixed order (text, title, url,
    source), always followed by the relevance line. A match without any of
    those fields renders as the relevance line alone.

    Args:
        match: The match to render.
        escape: HTML-escape metadata values. Urls without an http(s) scheme are
            then shown as text instead of links. Disable only for curated,
            fully trusted indexes.

    Returns:
        HTML fragment string.
    """
    metadata = match.metadata or {}
    parts = [
        _template_for(key, template, metadata[key], escape).format(
            _render_value(metadata[key], escape)
        )
        for key, template in FIELD_TEMPLATES
        if metadata.get(key)
    ]
    parts.append(RELEVANCE_TEMPLATE.format(format_relevance(match.score)))
    return "".join(parts)


def format_matches(matches: list[Match], *, escape: bool = True) -> list[str]:
    """Render every match, preserving upstream order."""
    return [format_match(match, escape=escape) for match in matches]
