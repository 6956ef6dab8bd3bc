"""
Segmentation Data Structures

Input and output records for the segmentation engine:
- ChapterIndex: one outline entry (chapter title + subchapter headings)
- SubchapterSpan: text attributed to one subchapter (or whole chapter)
- SectionResult: output record wrapping a SubchapterSpan with its chapter
- HeadingMatch: where a heading was found and how
- HeadingPosition: sorted input record for span extraction

All records are created during a single segmentation call and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Any, Tuple


# Accepted spellings of outline keys produced by upstream extractors
_TITLE_KEYS = ("chapterTitle", "ChapterTitle", "chapter_title", "title")
_SUBCHAPTER_KEYS = ("subchapters", "Subchapters", "subChapters", "sub_chapters")


@dataclass(frozen=True)
class ChapterIndex:
    """
    One chapter of the document outline.

    Example:
        >>> ChapterIndex("Chapter One", ("1.1 Background", "1.2 Methods"))
    """

    chapter_title: str
    subchapters: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate fields and freeze the subchapter sequence."""
        if not isinstance(self.chapter_title, str):
            raise TypeError("chapter_title must be a string")
        subchapters = tuple(self.subchapters or ())
        if not all(isinstance(s, str) for s in subchapters):
            raise TypeError("subchapters must be strings")
        object.__setattr__(self, "subchapters", subchapters)

    @property
    def has_subchapters(self) -> bool:
        return len(self.subchapters) > 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ChapterIndex:
        """
        Build a ChapterIndex from an outline dict.

        Accepts camelCase, PascalCase and snake_case keys, e.g.
        {"chapterTitle": "Intro", "subchapters": ["Scope"]}.

        Raises:
            ValueError: If no chapter title key is present
        """
        title = next((data[k] for k in _TITLE_KEYS if k in data), None)
        if title is None:
            raise ValueError(f"Outline entry has no chapter title: {data!r}")

        subchapters = next((data[k] for k in _SUBCHAPTER_KEYS if k in data), None) or []
        if isinstance(subchapters, str):
            raise TypeError("subchapters must be a list of strings, not a string")

        return cls(chapter_title=title, subchapters=tuple(subchapters))


@dataclass(frozen=True)
class SubchapterSpan:
    """Text attributed to one subchapter, or to a whole chapter without subchapters."""

    chapter: str
    title: str
    text: str
    total_tokens: int
    from_page: int
    to_page: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chapter": self.chapter,
            "title": self.title,
            "text": self.text,
            "totalTokens": self.total_tokens,
            "fromPage": self.from_page,
            "toPage": self.to_page,
        }


@dataclass(frozen=True)
class SectionResult:
    """One emitted section: the chapter it belongs to and its span."""

    chapter: str
    from_page: int
    to_page: int
    subchapter: SubchapterSpan

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize for downstream persistence/indexing.

        Example:
            >>> result.to_dict()
            {'chapter': 'Intro', 'fromPage': 1, 'toPage': 1, 'subchapter': {...}}
        """
        return {
            "chapter": self.chapter,
            "fromPage": self.from_page,
            "toPage": self.to_page,
            "subchapter": self.subchapter.to_dict(),
        }


@dataclass(frozen=True)
class HeadingMatch:
    """
    Location of a heading inside a haystack.

    length is the number of haystack characters the heading occupies, which
    differs from len(heading) when the match came from the cleaned or fuzzy
    strategy.
    """

    position: int
    length: int
    strategy: str


@dataclass(frozen=True)
class HeadingPosition:
    """A located heading inside a bounded region, ordered by position."""

    position: int
    heading: str
    length: int

    @classmethod
    def from_match(cls, heading: str, match: HeadingMatch) -> HeadingPosition:
        return cls(position=match.position, heading=heading, length=match.length)


__all__ = [
    "ChapterIndex",
    "SubchapterSpan",
    "SectionResult",
    "HeadingMatch",
    "HeadingPosition",
]
