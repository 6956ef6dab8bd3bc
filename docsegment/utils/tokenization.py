"""
Tokenization Utilities

Default token counter handed to the segmenter when the caller does not
inject its own. Backed by tiktoken.
"""

from typing import Optional
import tiktoken

from docsegment.config import TOKEN_ENCODING
from docsegment.utils.logging_config import logger


# Cache tokenizer instance for performance
_tokenizer_cache: Optional[tiktoken.Encoding] = None


def get_tokenizer() -> tiktoken.Encoding:
    """
    Get tiktoken tokenizer for the configured encoding.

    Uses module-level cache to avoid repeated initialization.

    Returns:
        Tiktoken encoding instance
    """
    global _tokenizer_cache

    if _tokenizer_cache is None:
        logger.debug(f"Initializing tiktoken tokenizer: {TOKEN_ENCODING}")
        _tokenizer_cache = tiktoken.get_encoding(TOKEN_ENCODING)

    return _tokenizer_cache


def count_tokens(text: str, tokenizer: Optional[tiktoken.Encoding] = None) -> int:
    """
    Count tokens in text.

    Empty and whitespace-only text counts as zero tokens without touching
    the tokenizer.

    Args:
        text: Text to count tokens in
        tokenizer: Optional pre-initialized tokenizer (for performance)

    Returns:
        Token count

    Example:
        >>> count_tokens("Hello, world!")
        4
        >>> count_tokens("   ")
        0
    """
    if not text or not text.strip():
        return 0

    if tokenizer is None:
        tokenizer = get_tokenizer()

    return len(tokenizer.encode(text))


def reset_tokenizer_cache():
    """
    Reset the cached tokenizer instance.

    Useful for testing or when changing TOKEN_ENCODING config.
    """
    global _tokenizer_cache
    _tokenizer_cache = None
    logger.debug("Tokenizer cache reset")
