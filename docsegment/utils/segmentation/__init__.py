"""
Segmentation Utilities

Pure text-analysis helpers used by the segmenter: heading location, span
extraction, page inference, and outline parsing.
"""

from docsegment.utils.segmentation.heading_locator import (
    clean_heading,
    find_exact,
    find_by_word_overlap,
    locate_heading,
)

from docsegment.utils.segmentation.page_resolver import (
    extract_page_markers,
    strip_trailing_markers,
    find_page_before,
    estimate_page_count,
    resolve_pages,
)

from docsegment.utils.segmentation.span_extractor import (
    ExtractedSpan,
    extract_spans,
)

from docsegment.utils.segmentation.outline_parser import (
    OutlineError,
    parse_outline,
    validate_outline,
    get_outline_summary,
)

__all__ = [
    # heading_locator
    'clean_heading',
    'find_exact',
    'find_by_word_overlap',
    'locate_heading',
    # page_resolver
    'extract_page_markers',
    'strip_trailing_markers',
    'find_page_before',
    'estimate_page_count',
    'resolve_pages',
    # span_extractor
    'ExtractedSpan',
    'extract_spans',
    # outline_parser
    'OutlineError',
    'parse_outline',
    'validate_outline',
    'get_outline_summary',
]
