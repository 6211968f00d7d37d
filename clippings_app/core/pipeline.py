"""
Runs the whole conversion: raw export -> highlights -> books -> markdown.

Failures never escape from here. They come back as a ParseOutcome whose
kind tells the caller what went wrong.
"""

import logging
from typing import Awaitable, Callable, Optional

from clippings_app.core.models import ParseOutcome, OutcomeKind
from clippings_app.core.parser import parse_clippings
from clippings_app.core.grouping import group_highlights
from clippings_app.core.markdown import format_as_markdown

logger = logging.getLogger(__name__)

STATUS_NO_FILE = "No file selected."
STATUS_READ_ERROR = "Error reading the file."

def reading_status(filename: str) -> str:
    return f'Reading file "{filename}"...'

def complete_status(count: int) -> str:
    return f"Parsing complete! {count} unique highlights found."

def parse_error_status(message: str) -> str:
    return f"Error during parsing: {message}"

def no_file_selected() -> ParseOutcome:
    return ParseOutcome(kind=OutcomeKind.NO_FILE_SELECTED, status=STATUS_NO_FILE)

def file_read_error() -> ParseOutcome:
    return ParseOutcome(kind=OutcomeKind.FILE_READ_ERROR, status=STATUS_READ_ERROR)

def decode_export(raw: bytes) -> str:
    """Decodes the export as UTF-8, dropping a leading byte-order mark."""
    return raw.decode("utf-8-sig")

def run_pipeline(content: str) -> ParseOutcome:
    """Parses already-loaded text. Any exception becomes a PARSE_ERROR."""
    try:
        highlights = parse_clippings(content)
        groups = group_highlights(highlights)
        markdown = format_as_markdown(groups)
    except Exception as e:
        logger.exception("Error during parsing")
        return ParseOutcome(
            kind=OutcomeKind.PARSE_ERROR,
            status=parse_error_status(str(e)),
            error=str(e)
        )

    logger.info("Parsed %d unique highlights from %d books", len(highlights), len(groups))
    return ParseOutcome(
        kind=OutcomeKind.COMPLETE,
        status=complete_status(len(highlights)),
        groups=groups,
        markdown=markdown,
        highlight_count=len(highlights)
    )

async def read_and_parse(filename: Optional[str], read: Callable[[], Awaitable[bytes]]) -> ParseOutcome:
    """
    Reads the whole file, then parses it in one go.
    The read is the only await; parsing starts once everything is in memory.
    """
    if not filename:
        return no_file_selected()

    try:
        raw = await read()
        content = decode_export(raw)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read %s: %s", filename, e)
        return file_read_error()

    return run_pipeline(content)
