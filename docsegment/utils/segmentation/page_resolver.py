"""
Page Number Resolver

Infers the printed page range of a text span. Upstream text extraction
inserts markers such as "=== PÁGINA 5 ===" or "=== PAGE 5 ===" at page
boundaries; when a span carries markers they are authoritative. Otherwise
the start page is the last marker preceding the span in the full document
and the length is estimated from the word count.
"""

import math
import re
from typing import List, Tuple

from docsegment.config import DEFAULT_PAGE, WORDS_PER_PAGE


# "=== PÁGINA 5 ===", "=== PAGE 12 ===", "===Pagina 3==="
PRIMARY_MARKER_PATTERN = re.compile(r'===\s*(P[ÁA]GINA|PAGE)\s+(\d+)\s*===', re.IGNORECASE)

# Looser form without the fences: "Page 5", "Página 5"
SECONDARY_MARKER_PATTERN = re.compile(r'(P[ÁA]GINA|PAGE)\s+(\d+)', re.IGNORECASE)


def extract_page_markers(text: str) -> List[int]:
    """
    Collect page numbers from marker lines in text.

    Each line contributes at most one number: the fenced marker if present,
    otherwise the first loose "Page N" occurrence.

    Args:
        text: Span text

    Returns:
        Sorted, de-duplicated page numbers (empty if none)

    Example:
        >>> extract_page_markers("=== PAGE 4 ===\\nbody\\nsee Page 6")
        [4, 6]
    """
    if not text:
        return []

    pages = set()
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue

        match = PRIMARY_MARKER_PATTERN.search(line) or SECONDARY_MARKER_PATTERN.search(line)
        if match:
            pages.add(int(match.group(2)))

    return sorted(pages)


def strip_trailing_markers(text: str) -> str:
    """
    Drop marker lines that close a span.

    A fenced marker with nothing but whitespace (or more markers) after it
    opens the page of whatever follows the span, so it does not belong to
    the span's own page range.

    Example:
        >>> strip_trailing_markers("Body.\\n=== PÁGINA 3 ===\\n")
        'Body.'
    """
    if not text:
        return ""

    lines = text.rstrip().splitlines()
    while lines and (not lines[-1].strip() or PRIMARY_MARKER_PATTERN.fullmatch(lines[-1].strip())):
        lines.pop()

    return "\n".join(lines)


def find_page_before(full_text: str, offset: int) -> int:
    """
    Return the last fenced page marker before offset in the full document.

    Args:
        full_text: Complete document text
        offset: Absolute character offset of the span start

    Returns:
        Highest marker number before offset, or DEFAULT_PAGE if none
    """
    if not full_text or offset <= 0:
        return DEFAULT_PAGE

    pages = [
        int(match.group(2))
        for match in PRIMARY_MARKER_PATTERN.finditer(full_text[:offset])
    ]

    return max(pages) if pages else DEFAULT_PAGE


def estimate_page_count(text: str, words_per_page: int = WORDS_PER_PAGE) -> int:
    """
    Estimate how many pages a span covers from its word count (minimum 1).

    Example:
        >>> estimate_page_count("word " * 251)
        2
    """
    word_count = len(text.split()) if text else 0
    return max(1, math.ceil(word_count / words_per_page))


def resolve_pages(
    span_text: str,
    full_text: str,
    absolute_start_offset: int,
    words_per_page: int = WORDS_PER_PAGE,
) -> Tuple[int, int]:
    """
    Infer (from_page, to_page) for a span.

    Args:
        span_text: Body text of the span
        full_text: Complete document text
        absolute_start_offset: Offset of the span's heading in full_text
        words_per_page: Words per page for the estimation fallback

    Returns:
        Tuple of (from_page, to_page) with from_page <= to_page

    Example:
        >>> resolve_pages("Body.", "=== PAGE 2 ===\\nHead\\nBody.", 15)
        (2, 2)
    """
    body = strip_trailing_markers(span_text)

    markers = extract_page_markers(body)
    if markers:
        return (markers[0], markers[-1])

    from_page = find_page_before(full_text, absolute_start_offset)
    to_page = from_page + estimate_page_count(body, words_per_page) - 1

    return (from_page, to_page)


__all__ = [
    'extract_page_markers',
    'strip_trailing_markers',
    'find_page_before',
    'estimate_page_count',
    'resolve_pages',
    'PRIMARY_MARKER_PATTERN',
    'SECONDARY_MARKER_PATTERN',
]
