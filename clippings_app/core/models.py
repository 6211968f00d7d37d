from dataclasses import dataclass, field
from enum import Enum
from typing import List, Dict, Optional

UNKNOWN_AUTHOR = "Unknown Author"

@dataclass
class Highlight:
    """Represents a single highlight extracted from a clippings export."""
    title: str
    author: str
    location: str     # Matched range, verbatim (e.g., '1035-1036')
    meta_line: str    # Second line of the block without the leading '- '
    content: str      # Highlighted text, may span several lines

    @property
    def content_length(self) -> int:
        return len(self.content)

    @property
    def key(self) -> str:
        """Identity used for de-duplication: title + location range."""
        return f"{self.title}|{self.location}"

@dataclass
class BookGroup:
    """All highlights of one book, ordered by location."""
    title: str
    author: str       # Taken from the first highlight seen for this title
    highlights: List[Highlight] = field(default_factory=list)

class OutcomeKind(str, Enum):
    COMPLETE = "complete"
    NO_FILE_SELECTED = "no_file_selected"
    FILE_READ_ERROR = "file_read_error"
    PARSE_ERROR = "parse_error"

@dataclass
class ParseOutcome:
    """
    Result of one parse invocation.
    Only COMPLETE outcomes carry groups and markdown.
    """
    kind: OutcomeKind
    status: str       # Human readable status line
    groups: Optional[Dict[str, BookGroup]] = None
    markdown: Optional[str] = None
    highlight_count: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind == OutcomeKind.COMPLETE
