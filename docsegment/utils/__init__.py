"""
Utilities Module for the Document Segmentation Engine

Structure:
- logging_config.py: Shared logging utilities
- tokenization.py: Default tiktoken token counter
- segmentation/: Heading location, span extraction, page inference, outline parsing
"""

# Re-export logging utilities at top level
from docsegment.utils.logging_config import setup_logger, get_logger, logger

__all__ = [
    "setup_logger",
    "get_logger",
    "logger",
]
