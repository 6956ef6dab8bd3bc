"""
Pytest configuration and shared fixtures for the segmentation engine tests.

Provides sample documents, outlines, and a deterministic token counter so
tests never need to load a tiktoken encoding.
"""

from typing import Callable, List
from unittest.mock import MagicMock

import pytest

from docsegment.models import ChapterIndex
from docsegment.segmenter import Segmenter


# Document with page markers (one chapter per page)
PAGED_TEXT = (
    "=== PÁGINA 1 ===\n"
    "Intro\n"
    "Hello.\n"
    "=== PÁGINA 2 ===\n"
    "Chapter One\n"
    "Body.\n"
    "=== PÁGINA 3 ===\n"
    "Chapter Two\n"
    "End."
)

# Document without page markers, one chapter with numbered subchapters
BOOK_TEXT = (
    "Preface\n"
    "Short preface.\n"
    "Chapter One\n"
    "Opening remarks.\n"
    "1.1 Background\n"
    "Background body text.\n"
    "1.2 Methods\n"
    "Methods body text.\n"
    "Chapter Two\n"
    "Closing body.\n"
)


def _count_words(text: str) -> int:
    return len(text.split())


@pytest.fixture
def word_token_counter() -> Callable[[str], int]:
    """
    Deterministic token counter: one token per whitespace-separated word.

    Example:
        >>> def test_something(word_token_counter):
        ...     assert word_token_counter("two words") == 2
    """
    return _count_words


@pytest.fixture
def mock_logger() -> MagicMock:
    """Stand-in for the injected loguru logger; records every call."""
    return MagicMock()


@pytest.fixture
def segmenter(word_token_counter, mock_logger) -> Segmenter:
    """Segmenter wired with the word counter and a mock logger."""
    return Segmenter(token_counter=word_token_counter, logger=mock_logger)


@pytest.fixture
def paged_text() -> str:
    """Three-page document with "=== PÁGINA n ===" markers."""
    return PAGED_TEXT


@pytest.fixture
def paged_outline() -> List[ChapterIndex]:
    """Outline for paged_text: three chapters without subchapters."""
    return [
        ChapterIndex("Intro"),
        ChapterIndex("Chapter One"),
        ChapterIndex("Chapter Two"),
    ]


@pytest.fixture
def book_text() -> str:
    """Marker-free document with two subchapters in "Chapter One"."""
    return BOOK_TEXT


@pytest.fixture
def book_outline() -> List[ChapterIndex]:
    """
    Outline for book_text.

    Subchapters of "Chapter One" are declared in reverse document order.
    """
    return [
        ChapterIndex("Preface"),
        ChapterIndex("Chapter One", ("1.2 Methods", "1.1 Background")),
        ChapterIndex("Chapter Two"),
    ]
