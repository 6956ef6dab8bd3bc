#!/usr/bin/env python3
"""
Segment a Document From the Command Line

Runs the segmenter over an extracted text file and an outline JSON file,
logs a summary, and optionally writes the sections as JSON.

Usage:
    python scripts/segment_document.py --text doc.txt --outline outline.json
    python scripts/segment_document.py --text doc.txt --outline outline.json --output sections.json
    python scripts/segment_document.py --text doc.txt --outline outline.json --encoding latin-1

The outline file holds {"index": [{"chapterTitle": ..., "subchapters": [...]}, ...]}
or a bare list of such entries.
"""

import argparse
import json
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from docsegment.segmenter import Segmenter, results_to_dicts, get_segmentation_summary
from docsegment.utils.logging_config import setup_logger, log_step_start, log_step_complete, logger
from docsegment.utils.segmentation import (
    OutlineError,
    parse_outline,
    validate_outline,
    get_outline_summary,
)


def load_text(path: Path, encoding: str = "utf-8") -> str:
    """Load extracted document text in the given encoding."""
    if not path.exists():
        raise FileNotFoundError(f"Text file not found: {path}")

    with open(path, 'r', encoding=encoding) as f:
        return f.read()


def load_outline(path: Path):
    """Load and parse the outline JSON file."""
    if not path.exists():
        raise FileNotFoundError(f"Outline file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        return parse_outline(f.read())


def main(argv=None):
    parser = argparse.ArgumentParser(description="Segment document text by chapter outline")
    parser.add_argument("--text", type=Path, required=True, help="Extracted document text file")
    parser.add_argument("--outline", type=Path, required=True, help="Outline JSON file")
    parser.add_argument("--output", type=Path, help="Write sections as JSON to this file")
    parser.add_argument("--encoding", default="utf-8", help="Encoding of the text file (default: utf-8)")
    parser.add_argument("--log-level", help="Console/run log level (default: LOG_LEVEL from .env)")
    parser.add_argument("--no-log-files", action="store_true", help="Log to the console only")
    args = parser.parse_args(argv)

    setup_logger(level=args.log_level, log_to_file=not args.no_log_files)
    step_name = f"Segmenting {args.text.name}"
    log_step_start(step_name)
    start_time = time.time()

    try:
        full_text = load_text(args.text, encoding=args.encoding)
        outline = load_outline(args.outline)
    except (FileNotFoundError, UnicodeDecodeError, LookupError, OutlineError) as e:
        logger.error(str(e))
        return 1

    logger.info(get_outline_summary(outline))
    validate_outline(outline)

    results = Segmenter().segment(full_text, outline)
    logger.info(get_segmentation_summary(results))

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, 'w', encoding='utf-8') as f:
            json.dump(results_to_dicts(results), f, ensure_ascii=False, indent=2)
        logger.success(f"Sections written to: {args.output}")

    log_step_complete(step_name, time.time() - start_time, section_count=len(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
