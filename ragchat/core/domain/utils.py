"""Text helpers shared by the domain and adapters."""

import unicodedata

EXCERPT_LIMIT = 300


def normalize_text(text: str | None) -> str:
    """Strip BOM/replacement characters and apply NFKC normalization.

    Args:
        text: Input text, possibly None.

    Returns:
        Cleaned text; empty string for falsy input.
    """
    if not text:
        return ""
    cleaned = text.replace("\ufeff", "").replace("\ufffd", "")
    return unicodedata.normalize("NFKC", cleaned)


def excerpt(text: str | None, limit: int = EXCERPT_LIMIT) -> str:
    """Return at most ``limit`` characters of ``text``, marking truncation with ``...``.

    Args:
        text: Source text.
        limit: Maximum number of characters taken from ``text``.

    Returns:
        The leading slice, followed by ``...`` when characters were dropped.
    """
    text = text or ""
    snippet = text[:limit]
    if len(text) > limit:
        return f"{snippet}..."
    return snippet
