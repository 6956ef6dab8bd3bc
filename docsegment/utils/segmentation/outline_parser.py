"""
Outline Parser

Loads the chapter/subchapter outline produced upstream (AI or rule-based
table-of-contents extraction) into ChapterIndex records.

Accepted payloads:
- JSON text or dict wrapping the list: {"index": [{...}, ...]}
- A bare list of chapter dicts or ChapterIndex records

Key Functions:
- parse_outline: Main entry point, returns List[ChapterIndex]
- validate_outline: Report structural problems without raising
- get_outline_summary: Human-readable outline statistics
"""

import json
from typing import List, Any, Union

from docsegment.models import ChapterIndex
from docsegment.utils.logging_config import logger


# Keys under which upstream extractors wrap the chapter list
OUTLINE_ROOT_KEYS = ('index', 'Index', 'chapters', 'Chapters')


class OutlineError(ValueError):
    """Raised when an outline payload cannot be interpreted."""
    pass


def _unwrap_entries(payload: Any) -> List[Any]:
    """Return the raw list of chapter entries from a decoded payload."""
    if isinstance(payload, list):
        return payload

    if isinstance(payload, dict):
        for key in OUTLINE_ROOT_KEYS:
            if key in payload:
                entries = payload[key]
                if not isinstance(entries, list):
                    raise OutlineError(f"Outline '{key}' must be a list, got {type(entries).__name__}")
                return entries
        raise OutlineError(
            f"Outline object has none of the expected keys: {', '.join(OUTLINE_ROOT_KEYS)}"
        )

    raise OutlineError(f"Unsupported outline payload type: {type(payload).__name__}")


def parse_outline(payload: Union[str, bytes, dict, list]) -> List[ChapterIndex]:
    """
    Parse an outline payload into ChapterIndex records.

    Chapter titles and subchapter headings are whitespace-trimmed. Entries
    with a blank title are skipped with a warning; blank subchapter headings
    are dropped.

    Args:
        payload: JSON text, decoded dict/list, or list of ChapterIndex

    Returns:
        List of ChapterIndex in outline order

    Raises:
        OutlineError: If the payload is not valid JSON or has the wrong shape

    Example:
        >>> parse_outline('{"index": [{"chapterTitle": "Intro", "subchapters": []}]}')
        [ChapterIndex(chapter_title='Intro', subchapters=())]
    """
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as e:
            raise OutlineError(f"Outline is not valid JSON: {e}") from e

    entries = _unwrap_entries(payload)
    chapters = []

    for i, entry in enumerate(entries):
        if isinstance(entry, ChapterIndex):
            chapter = entry
        elif isinstance(entry, dict):
            try:
                chapter = ChapterIndex.from_dict(entry)
            except (TypeError, ValueError) as e:
                raise OutlineError(f"Invalid outline entry #{i}: {e}") from e
        else:
            raise OutlineError(
                f"Outline entry #{i} must be an object, got {type(entry).__name__}"
            )

        title = chapter.chapter_title.strip()
        if not title:
            logger.warning(f"Skipping outline entry #{i} with blank chapter title")
            continue

        subchapters = tuple(s.strip() for s in chapter.subchapters if s.strip())
        chapters.append(ChapterIndex(chapter_title=title, subchapters=subchapters))

    logger.debug(f"Parsed outline with {len(chapters)} chapters")
    return chapters


def validate_outline(outline: List[ChapterIndex]) -> List[str]:
    """
    Check an outline for structural problems.

    Checks:
    - At least one chapter
    - Chapter titles are unique (case-insensitive)
    - Subchapter headings are unique within their chapter

    Args:
        outline: Parsed outline

    Returns:
        List of problem descriptions (empty if the outline looks sane)
    """
    problems = []

    if not outline:
        problems.append("Outline has no chapters")
        return problems

    seen_titles = set()
    for chapter in outline:
        key = chapter.chapter_title.strip().lower()
        if key in seen_titles:
            problems.append(f"Duplicate chapter title: '{chapter.chapter_title}'")
        seen_titles.add(key)

        seen_subchapters = set()
        for heading in chapter.subchapters:
            sub_key = heading.strip().lower()
            if sub_key in seen_subchapters:
                problems.append(
                    f"Duplicate subchapter '{heading}' in chapter '{chapter.chapter_title}'"
                )
            seen_subchapters.add(sub_key)

    for problem in problems:
        logger.warning(f"Outline validation: {problem}")

    return problems


def get_outline_summary(outline: List[ChapterIndex]) -> str:
    """
    Generate human-readable summary of an outline.

    Example:
        >>> print(get_outline_summary(outline))
        Outline Summary: 3 chapters, 5 subchapters
          Chapters with subchapters: 2
          Chapters without subchapters: 1
    """
    if not outline:
        return "Outline Summary: No chapters"

    with_subchapters = sum(1 for c in outline if c.has_subchapters)
    total_subchapters = sum(len(c.subchapters) for c in outline)

    summary_lines = [
        f"Outline Summary: {len(outline)} chapters, {total_subchapters} subchapters",
        f"  Chapters with subchapters: {with_subchapters}",
        f"  Chapters without subchapters: {len(outline) - with_subchapters}",
    ]

    return "\n".join(summary_lines)


__all__ = [
    'OutlineError',
    'parse_outline',
    'validate_outline',
    'get_outline_summary',
]
