"""
Heading Locator

Finds an outline heading inside a region of extracted text. Upstream outlines
drift from the literal document text (numbering, OCR noise), so matching
falls back through progressively looser strategies; the first hit wins:

1. exact   - case-insensitive substring search of the heading
2. cleaned - same search after stripping a leading enumerator ("3.", "A)")
3. fuzzy   - first line containing at least FUZZY_MATCH_THRESHOLD of the
             heading's words (multi-word headings only)

All functions are pure: text in, HeadingMatch or None out.
"""

import re
from typing import Optional

from docsegment.config import FUZZY_MATCH_THRESHOLD
from docsegment.models import HeadingMatch


STRATEGY_EXACT = "exact"
STRATEGY_CLEANED = "cleaned"
STRATEGY_FUZZY = "fuzzy"

# Leading enumerator token: "3.", "A)", "IV " ("1.2 X" loses only "1.")
ENUMERATOR_PREFIX_PATTERN = re.compile(r'^[a-zA-Z0-9]+[.)\s]*')

# Non-empty physical lines, with their offsets preserved
LINE_PATTERN = re.compile(r'[^\r\n]+')


def clean_heading(heading: str) -> str:
    """
    Strip a leading enumerator token from a heading.

    Args:
        heading: Heading text as declared in the outline

    Returns:
        Heading without its first enumerator token, or "" if nothing remains

    Example:
        >>> clean_heading("3. Conclusion")
        'Conclusion'
        >>> clean_heading("A) Scope of work")
        'Scope of work'
    """
    if not heading or not heading.strip():
        return ""

    cleaned = ENUMERATOR_PREFIX_PATTERN.sub('', heading.strip(), count=1)
    return cleaned.strip()


def find_exact(haystack: str, needle: str) -> Optional[HeadingMatch]:
    """
    Case-insensitive substring search.

    Matching runs on the original haystack so the reported offsets stay valid
    even for characters whose lowercase form has a different length.
    """
    if not haystack or not needle:
        return None

    match = re.search(re.escape(needle), haystack, re.IGNORECASE)
    if match is None:
        return None

    return HeadingMatch(
        position=match.start(),
        length=match.end() - match.start(),
        strategy=STRATEGY_EXACT,
    )


def find_by_word_overlap(
    haystack: str,
    heading: str,
    threshold: float = FUZZY_MATCH_THRESHOLD,
) -> Optional[HeadingMatch]:
    """
    Find the first line that contains most of the heading's words.

    Each heading word is tested as a case-insensitive substring of the line.
    Single-word headings never match here; they are too ambiguous.

    Args:
        haystack: Text to scan line by line
        heading: Heading text (original, not cleaned)
        threshold: Minimum fraction of words that must appear in the line

    Returns:
        HeadingMatch covering the whole line, or None

    Example:
        >>> find_by_word_overlap("Intro\\nResults of the trial\\n", "Trial Results")
        HeadingMatch(position=6, length=20, strategy='fuzzy')
    """
    if not haystack or not heading:
        return None

    words = [word.lower() for word in heading.split()]
    if len(words) <= 1:
        return None

    for line_match in LINE_PATTERN.finditer(haystack):
        line = line_match.group(0)
        line_lower = line.lower()
        matching_words = sum(1 for word in words if word in line_lower)

        if matching_words / len(words) >= threshold:
            return HeadingMatch(
                position=line_match.start(),
                length=len(line),
                strategy=STRATEGY_FUZZY,
            )

    return None


def locate_heading(
    haystack: str,
    heading: str,
    threshold: float = FUZZY_MATCH_THRESHOLD,
) -> Optional[HeadingMatch]:
    """
    Locate a heading in text using exact, cleaned, then word-overlap matching.

    Args:
        haystack: Text region to search (full document or a chapter region)
        heading: Heading text from the outline
        threshold: Word-overlap threshold for the fuzzy fallback

    Returns:
        HeadingMatch with position relative to haystack, or None if not found

    Example:
        >>> locate_heading("Intro\\nConclusion\\nDone.", "3. Conclusion")
        HeadingMatch(position=6, length=10, strategy='cleaned')
    """
    if not haystack or not heading or not heading.strip():
        return None

    heading = heading.strip()

    match = find_exact(haystack, heading)
    if match is not None:
        return match

    cleaned = clean_heading(heading)
    if cleaned and cleaned != heading:
        match = find_exact(haystack, cleaned)
        if match is not None:
            return HeadingMatch(
                position=match.position,
                length=match.length,
                strategy=STRATEGY_CLEANED,
            )

    return find_by_word_overlap(haystack, heading, threshold)


__all__ = [
    'clean_heading',
    'find_exact',
    'find_by_word_overlap',
    'locate_heading',
    'STRATEGY_EXACT',
    'STRATEGY_CLEANED',
    'STRATEGY_FUZZY',
]
