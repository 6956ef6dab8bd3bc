"""
Configuration Module for the Document Segmentation Engine

Loads configuration from environment variables (.env file) and validates
the values on import. Covers heading-matching thresholds, page estimation,
token encoding, and logging paths.
"""

import os
import sys
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Note: Logger is configured by setup_logger() in logging_config.
# Import is deferred to avoid circular dependency during config loading


# Load environment variables from .env file
# Look for .env in the project root (parent of docsegment/)
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)
else:
    # Try loading from current directory as fallback
    load_dotenv()


class ConfigurationError(Exception):
    """Raised when configuration is missing or invalid."""
    pass


def get_env_variable(var_name: str, required: bool = True, default: Optional[str] = None) -> str:
    """
    Get environment variable with validation.

    Args:
        var_name: Name of environment variable
        required: Whether this variable is required
        default: Default value if not required and not found

    Returns:
        Value of environment variable

    Raises:
        ConfigurationError: If required variable is missing
    """
    value = os.getenv(var_name)

    if value is None or value.strip() == "":
        if required:
            raise ConfigurationError(
                f"Required environment variable '{var_name}' is not set. "
                f"Please add it to your .env file."
            )
        return default

    return value.strip()


# ==================================
# Heading Matching
# ==================================

try:
    # Minimum share of heading words a line must contain for the
    # word-overlap fallback to accept it
    FUZZY_MATCH_THRESHOLD = float(
        get_env_variable("SEGMENTER_FUZZY_THRESHOLD", required=False, default="0.70")
    )

    # ==================================
    # Page Inference
    # ==================================

    # Words per printed page used when a span carries no page markers
    WORDS_PER_PAGE = int(
        get_env_variable("SEGMENTER_WORDS_PER_PAGE", required=False, default="250")
    )

except ValueError as e:
    # Note: Using print() here because this runs during module import,
    # before logging is configured.
    print(f"\n❌ Configuration Error: {e}", file=sys.stderr)
    print("\nNumeric overrides must be valid numbers:", file=sys.stderr)
    print("  - SEGMENTER_FUZZY_THRESHOLD (e.g. 0.70)", file=sys.stderr)
    print("  - SEGMENTER_WORDS_PER_PAGE (e.g. 250)", file=sys.stderr)
    sys.exit(1)

# Page number reported when nothing can be inferred
DEFAULT_PAGE = 1


# ==================================
# Tokenization
# ==================================

# Encoding for the default token counter (tiktoken)
TOKEN_ENCODING = get_env_variable("SEGMENTER_TOKEN_ENCODING", required=False, default="cl100k_base")


# ==================================
# File Paths
# ==================================

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Logging directory (only touched by setup_logger)
LOGS_DIR = PROJECT_ROOT / "logs"


# ==================================
# Logging Configuration
# ==================================

# Log level (used by logging_config.py)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Note: Log format, rotation, and retention are configured in
# docsegment/utils/logging_config.py


# ==================================
# Validation on Import
# ==================================

def validate_configuration():
    """
    Validate configuration on module import.

    Checks:
    - Fuzzy threshold is a fraction in (0, 1]
    - Words per page is positive
    - Default page is positive
    - Token encoding is named

    Raises:
        ConfigurationError: If configuration is invalid
    """
    errors = []

    if not 0 < FUZZY_MATCH_THRESHOLD <= 1:
        errors.append(
            f"FUZZY_MATCH_THRESHOLD must be in (0, 1], got {FUZZY_MATCH_THRESHOLD}"
        )

    if WORDS_PER_PAGE <= 0:
        errors.append(f"WORDS_PER_PAGE must be positive, got {WORDS_PER_PAGE}")

    if DEFAULT_PAGE < 1:
        errors.append(f"DEFAULT_PAGE must be at least 1, got {DEFAULT_PAGE}")

    if not TOKEN_ENCODING:
        errors.append("TOKEN_ENCODING is empty")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {err}" for err in errors)
        raise ConfigurationError(error_msg)


# Run validation on import
try:
    validate_configuration()
except ConfigurationError as e:
    # Note: Using print() here because this runs during module import,
    # before logging is configured.
    print(f"\n❌ {e}", file=sys.stderr)
    sys.exit(1)


def print_configuration():
    """Print current configuration (for debugging)."""
    print("\n" + "=" * 80)
    print("Document Segmentation Engine Configuration")
    print("=" * 80)
    print(f"\nHeading Matching:")
    print(f"  Fuzzy threshold: {FUZZY_MATCH_THRESHOLD:.2f}")
    print(f"\nPage Inference:")
    print(f"  Words per page: {WORDS_PER_PAGE}")
    print(f"  Default page: {DEFAULT_PAGE}")
    print(f"\nTokenization:")
    print(f"  Encoding: {TOKEN_ENCODING}")
    print(f"\nLogging:")
    print(f"  Level: {LOG_LEVEL}")
    print(f"  Directory: {LOGS_DIR}")
    print("=" * 80 + "\n")


# Export all configuration variables
__all__ = [
    # Heading matching
    "FUZZY_MATCH_THRESHOLD",
    # Page inference
    "WORDS_PER_PAGE",
    "DEFAULT_PAGE",
    # Tokenization
    "TOKEN_ENCODING",
    # File paths
    "PROJECT_ROOT",
    "LOGS_DIR",
    # Logging
    "LOG_LEVEL",
    # Helpers
    "ConfigurationError",
    "get_env_variable",
    "validate_configuration",
    "print_configuration",
]
