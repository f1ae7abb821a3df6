"""Keyword context-window retrieval.

Finds the first query keyword (in query order) that occurs in the content
and returns the surrounding text, ``radius`` characters on each side of the
match, clamped to the content bounds.
"""

DEFAULT_WINDOW_RADIUS = 300


def _lower_with_offsets(text: str) -> tuple[str, list[int] | None]:
    """Lower-case *text*, mapping lowered indices back to original ones.

    Returns ``(lowered, None)`` when lower-casing keeps every character the
    same length, which is the common case.
    """
    lowered = text.lower()
    if len(lowered) == len(text):
        return lowered, None

    # Some code points (e.g. "İ") expand when lower-cased.
    parts: list[str] = []
    offsets: list[int] = []
    for i, ch in enumerate(text):
        low = ch.lower()
        parts.append(low)
        offsets.extend([i] * len(low))
    offsets.append(len(text))
    return "".join(parts), offsets


def query_keywords(query: str) -> list[str]:
    """Lower-case *query* and split it on whitespace, keeping order and duplicates."""
    return query.lower().split()


def find_context_window(
    content: str,
    query: str,
    radius: int = DEFAULT_WINDOW_RADIUS,
) -> str:
    """Return the context window around the first matching query keyword.

    Args:
        content: Stored text to search.
        query: Free-text query; each whitespace-separated token is a keyword.
        radius: Characters to include before the match start and after the
            match end.

    Returns:
        The original-case substring around the match, or ``""`` when no
        keyword occurs in the content.
    """
    keywords = query_keywords(query)
    if not keywords or not content:
        return ""

    lowered, offsets = _lower_with_offsets(content)

    for keyword in keywords:
        position = lowered.find(keyword)
        if position == -1:
            continue

        match_end = position + len(keyword)
        if offsets is not None:
            position, match_end = offsets[position], offsets[match_end]

        start = max(0, position - radius)
        end = min(len(content), match_end + radius)
        return content[start:end]

    return ""
