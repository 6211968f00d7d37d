"""
Parses a Kindle 'My Clippings.txt' export into de-duplicated highlights.
"""

import re
import logging
from typing import List, Dict, Optional

from clippings_app.core.models import Highlight, UNKNOWN_AUTHOR
from clippings_app.utils.text import normalize_line_endings, clean_lines, trim

logger = logging.getLogger(__name__)

DELIMITER = "=========="

# Highlights carry a location RANGE (e.g. 123-456). Notes and bookmarks
# only have a single number and are skipped.
LOCATION_RANGE_RE = re.compile(r'(\d+)-(\d+)', re.ASCII)
# "Title (Author)" -> the last parenthesized group, anchored at the end
AUTHOR_RE = re.compile(r'\(([^)]+)\)$')

def parse_clippings(content: str) -> List[Highlight]:
    """
    Main logic: Split -> Extract -> De-duplicate.
    Returns the unique highlights in the order their key was first seen.
    """
    return list(dedup_highlights(extract_highlights(content)).values())

def split_blocks(content: str) -> List[str]:
    """Splits the raw export on the delimiter line."""
    return normalize_line_endings(content).split(DELIMITER)

def extract_highlights(content: str) -> List[Highlight]:
    """Extracts every well-formed highlight, duplicates included."""
    highlights = []
    for block in split_blocks(content):
        highlight = extract_highlight(block)
        if highlight:
            highlights.append(highlight)
    return highlights

def extract_highlight(block: str) -> Optional[Highlight]:
    """
    Turns one raw block into a Highlight.
    Returns None for anything that is not a highlight (notes, bookmarks, debris).
    """
    lines = clean_lines(block)

    # Title, meta and at least one line of content
    if len(lines) < 3:
        if lines:
            logger.debug("Skipping block with %d line(s): %r", len(lines), lines[0])
        return None

    meta_line = lines[1]
    location_match = LOCATION_RANGE_RE.search(meta_line)
    if not location_match:
        logger.debug("Skipping block without location range: %r", meta_line)
        return None

    title, author = _split_title_author(lines[0])

    if meta_line.startswith('- '):
        meta_line = meta_line[2:]

    return Highlight(
        title=title,
        author=author,
        location=location_match.group(0),
        meta_line=meta_line,
        content='\n'.join(lines[2:])
    )

def dedup_highlights(highlights: List[Highlight]) -> Dict[str, Highlight]:
    """
    Keeps one highlight per (title, location) key: the longest one.
    On equal length the first one wins. Replacing a value keeps the key's
    original position in the mapping.
    """
    unique: Dict[str, Highlight] = {}
    for highlight in highlights:
        existing = unique.get(highlight.key)
        if existing is None or highlight.content_length > existing.content_length:
            unique[highlight.key] = highlight
    return unique

# --- Internal Helpers ---

def _split_title_author(title_line: str):
    match = AUTHOR_RE.search(title_line)
    if not match:
        return title_line, UNKNOWN_AUTHOR
    return trim(title_line[:match.start()]), match.group(1)
