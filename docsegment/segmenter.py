"""
STRUCTURAL SEGMENTATION

Partitions the plain text of a document into chapter/subchapter spans
following an upstream outline.

Process (per chapter, in outline order):
1. Locate the chapter title in the full text (skip the chapter if missing)
2. Bound the chapter at the next chapter's title, or the end of the document
3. Locate each subchapter heading inside the chapter region
4. Order located subchapters by position in the text (not outline order)
5. Slice spans, count tokens, infer page ranges
6. Emit one SectionResult per span (one per chapter when no subchapters)

Input: full document text + List[ChapterIndex]
Output: List[SectionResult] in document order

Failure containment: the public entry point never raises. Missing headings
are skipped, empty input returns [], and unexpected errors are logged and
the sections gathered so far are returned.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Union

from docsegment.config import FUZZY_MATCH_THRESHOLD, WORDS_PER_PAGE
from docsegment.models import (
    ChapterIndex,
    HeadingPosition,
    SectionResult,
    SubchapterSpan,
)
from docsegment.utils.logging_config import get_logger
from docsegment.utils.segmentation import (
    extract_spans,
    locate_heading,
    resolve_pages,
)
from docsegment.utils.tokenization import count_tokens


TokenCounter = Callable[[str], int]
OutlineEntry = Union[ChapterIndex, Dict[str, Any]]


class Segmenter:
    """
    Splits document text into spans following a chapter outline.

    Holds only configuration and collaborators; every segment() call works
    on its own local state, so one instance can serve many documents.

    Example:
        >>> segmenter = Segmenter(token_counter=lambda text: len(text.split()))
        >>> results = segmenter.segment(full_text, [ChapterIndex("Intro")])
        >>> results[0].subchapter.title
        'Intro'
    """

    def __init__(
        self,
        token_counter: Optional[TokenCounter] = None,
        logger: Optional[Any] = None,
        fuzzy_threshold: float = FUZZY_MATCH_THRESHOLD,
        words_per_page: int = WORDS_PER_PAGE,
    ):
        """
        Args:
            token_counter: Callable returning the token count of a text
                (defaults to the tiktoken-backed count_tokens)
            logger: Logger with loguru's interface (defaults to a bound
                loguru logger named "segmenter")
            fuzzy_threshold: Word-overlap threshold for heading matching
            words_per_page: Words per page for page estimation
        """
        self.token_counter = token_counter or count_tokens
        self.logger = logger or get_logger("segmenter")
        self.fuzzy_threshold = fuzzy_threshold
        self.words_per_page = words_per_page

    def segment(
        self,
        full_text: Optional[str],
        outline: Optional[Sequence[OutlineEntry]],
    ) -> List[SectionResult]:
        """
        Segment full_text according to outline.

        Args:
            full_text: Complete extracted document text
            outline: Ordered chapters (ChapterIndex or outline dicts)

        Returns:
            SectionResults in document order; possibly empty or partial
        """
        results: List[SectionResult] = []

        if not isinstance(full_text, str) or not full_text.strip() or not outline:
            self.logger.debug("Empty text or outline, nothing to segment")
            return results

        try:
            for i, entry in enumerate(outline):
                # Entries are coerced as they are reached so a malformed
                # entry only stops processing at its own position
                chapter = self._coerce_chapter(entry)
                next_chapter = self._peek_chapter(outline, i + 1)

                for section in self._segment_chapter(full_text, chapter, next_chapter):
                    results.append(section)

            self.logger.info(
                f"Processed {len(outline)} chapters, extracted {len(results)} sections"
            )

        except Exception as e:
            self.logger.exception(
                f"Error extracting sections, returning {len(results)} sections found so far: {e}"
            )

        return results

    @staticmethod
    def _coerce_chapter(entry: OutlineEntry) -> ChapterIndex:
        if isinstance(entry, dict):
            return ChapterIndex.from_dict(entry)
        if not isinstance(entry, ChapterIndex):
            raise TypeError(f"Outline entry must be a ChapterIndex or dict, got {type(entry).__name__}")
        return entry

    def _peek_chapter(
        self,
        outline: Sequence[OutlineEntry],
        index: int,
    ) -> Optional[ChapterIndex]:
        """Return the outline entry at index as a boundary, or None if absent or malformed."""
        if index >= len(outline):
            return None

        try:
            return self._coerce_chapter(outline[index])
        except (TypeError, ValueError) as e:
            self.logger.debug(f"Outline entry #{index} unusable as chapter boundary: {e}")
            return None

    def _locate(self, haystack: str, heading: str):
        return locate_heading(haystack, heading, self.fuzzy_threshold)

    def _segment_chapter(
        self,
        full_text: str,
        chapter: ChapterIndex,
        next_chapter: Optional[ChapterIndex],
    ) -> Iterator[SectionResult]:
        """Yield the sections of one chapter; yields nothing if its title is missing."""
        title = chapter.chapter_title

        chapter_match = self._locate(full_text, title)
        if chapter_match is None:
            self.logger.warning(f"Chapter not found in text: {title}")
            return

        chapter_start = chapter_match.position
        chapter_end = len(full_text)

        if next_chapter is not None:
            next_match = self._locate(full_text, next_chapter.chapter_title)
            if next_match is not None and next_match.position > chapter_start:
                chapter_end = next_match.position

        region = full_text[chapter_start:chapter_end]
        self.logger.debug(
            f"Chapter '{title}' located ({chapter_match.strategy}) "
            f"at {chapter_start}-{chapter_end}"
        )

        if chapter.has_subchapters:
            positions = self._locate_subchapters(region, chapter)
            spans = extract_spans(region, positions)
        else:
            # Whole chapter as a single span headed by the chapter title
            spans = extract_spans(region, [HeadingPosition(0, title, chapter_match.length)])

        for span in spans:
            yield self._build_section(
                full_text=full_text,
                chapter_title=title,
                span_title=span.heading,
                text=span.text,
                absolute_start=chapter_start + span.start,
            )

    def _locate_subchapters(self, region: str, chapter: ChapterIndex) -> List[HeadingPosition]:
        """Locate subchapter headings in a chapter region, ordered by position."""
        positions = []

        for heading in chapter.subchapters:
            match = self._locate(region, heading)
            if match is None:
                self.logger.warning(
                    f"Subchapter not found in chapter '{chapter.chapter_title}': {heading}"
                )
                continue

            self.logger.debug(f"Found subchapter '{heading}' at {match.position} ({match.strategy})")
            positions.append(HeadingPosition.from_match(heading, match))

        if not positions:
            # Declared subchapters but none located: chapter yields no sections
            self.logger.warning(
                f"No subchapters of '{chapter.chapter_title}' found, chapter content not extracted"
            )

        positions.sort(key=lambda p: p.position)
        return positions

    def _build_section(
        self,
        full_text: str,
        chapter_title: str,
        span_title: str,
        text: str,
        absolute_start: int,
    ) -> SectionResult:
        token_count = self.token_counter(text)
        from_page, to_page = resolve_pages(text, full_text, absolute_start, self.words_per_page)

        self.logger.debug(
            f"Extracted '{span_title}': {len(text)} characters, {token_count} tokens, "
            f"pages {from_page}-{to_page}"
        )

        return SectionResult(
            chapter=chapter_title,
            from_page=from_page,
            to_page=to_page,
            subchapter=SubchapterSpan(
                chapter=chapter_title,
                title=span_title,
                text=text,
                total_tokens=token_count,
                from_page=from_page,
                to_page=to_page,
            ),
        )


def segment(
    full_text: Optional[str],
    outline: Optional[Sequence[OutlineEntry]],
    token_counter: Optional[TokenCounter] = None,
    logger: Optional[Any] = None,
) -> List[SectionResult]:
    """
    Segment a document with a fresh Segmenter.

    Example:
        >>> results = segment(text, parse_outline(outline_json))
    """
    return Segmenter(token_counter=token_counter, logger=logger).segment(full_text, outline)


def results_to_dicts(results: Sequence[SectionResult]) -> List[Dict[str, Any]]:
    """Serialize results for downstream persistence or indexing."""
    return [result.to_dict() for result in results]


def get_segmentation_summary(results: Sequence[SectionResult]) -> str:
    """
    Generate human-readable summary of segmentation results.

    Example:
        >>> print(get_segmentation_summary(results))
        Segmentation Summary: 4 sections from 2 chapters
          Total tokens: 1830
          Pages: 1-12
    """
    if not results:
        return "Segmentation Summary: No sections extracted"

    chapters = []
    for result in results:
        if result.chapter not in chapters:
            chapters.append(result.chapter)

    total_tokens = sum(r.subchapter.total_tokens for r in results)
    first_page = min(r.from_page for r in results)
    last_page = max(r.to_page for r in results)

    summary_lines = [
        f"Segmentation Summary: {len(results)} sections from {len(chapters)} chapters",
        f"  Total tokens: {total_tokens}",
        f"  Pages: {first_page}-{last_page}",
    ]

    return "\n".join(summary_lines)


__all__ = [
    "Segmenter",
    "segment",
    "results_to_dicts",
    "get_segmentation_summary",
]
