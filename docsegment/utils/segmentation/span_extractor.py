"""
Span Extractor

Turns located heading positions inside a bounded region into contiguous,
non-overlapping spans. Each span runs from its heading to the next heading
(or the end of the region); the heading itself is removed so the span text
is body content only.
"""

from dataclasses import dataclass
from typing import List, Sequence

from docsegment.models import HeadingPosition


@dataclass(frozen=True)
class ExtractedSpan:
    """
    A slice of a region attributed to one heading.

    start/end are offsets in the region (end exclusive) and include the
    heading; text is the body with the heading and surrounding whitespace
    removed.
    """

    heading: str
    start: int
    end: int
    text: str


def extract_spans(region: str, positions: Sequence[HeadingPosition]) -> List[ExtractedSpan]:
    """
    Slice region into one span per heading position.

    Positions are ordered by offset (stable, so equal offsets keep their
    input order) before slicing.

    Args:
        region: Bounded text region (chapter text or whole document)
        positions: Located headings with offsets relative to region

    Returns:
        Spans in region order

    Example:
        >>> region = "Chapter\\n1.1 A\\nalpha\\n1.2 B\\nbeta"
        >>> spans = extract_spans(region, [
        ...     HeadingPosition(8, "1.1 A", 5),
        ...     HeadingPosition(20, "1.2 B", 5),
        ... ])
        >>> [s.text for s in spans]
        ['alpha', 'beta']
    """
    if not region or not positions:
        return []

    ordered = sorted(positions, key=lambda p: p.position)
    spans = []

    for i, current in enumerate(ordered):
        end = ordered[i + 1].position if i + 1 < len(ordered) else len(region)
        raw = region[current.position:end]

        spans.append(ExtractedSpan(
            heading=current.heading,
            start=current.position,
            end=end,
            text=raw[current.length:].strip(),
        ))

    return spans


__all__ = [
    'ExtractedSpan',
    'extract_spans',
]
