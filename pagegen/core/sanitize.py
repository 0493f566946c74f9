"""
pagegen/core/sanitize.py
Trims whatever the model wrote around the HTML document.
"""

from pagegen.core.config import DOC_START_MARKER, DOC_END_MARKER


def extract_html(
    raw: str,
    start_marker: str = DOC_START_MARKER,
    end_marker:   str = DOC_END_MARKER,
) -> str:
    """
    First start marker → last end marker (inclusive).
    Missing start → from index 0. Missing end → to end of string.
    """
    start = raw.find(start_marker)
    if start < 0:
        start = 0

    end = raw.rfind(end_marker)
    if end < 0 or end < start:
        # end marker only appears before the document starts → keep the tail
        end = len(raw)
    else:
        end += len(end_marker)

    return raw[start:end]
