"""
Accordion view of the grouped highlights: one collapsible section per book.

Each section owns its own collapsed/expanded state. Sections are
independent, there is no "expand all".
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Dict

from bs4 import BeautifulSoup

from clippings_app.core.models import BookGroup, Highlight

class SectionState(str, Enum):
    COLLAPSED = "collapsed"
    EXPANDED = "expanded"

    def toggled(self) -> "SectionState":
        if self is SectionState.COLLAPSED:
            return SectionState.EXPANDED
        return SectionState.COLLAPSED

@dataclass
class BookSection:
    title: str
    author: str
    highlights: List[Highlight] = field(default_factory=list)
    state: SectionState = SectionState.COLLAPSED

    def toggle(self) -> SectionState:
        """Header activation: flips between collapsed and expanded."""
        self.state = self.state.toggled()
        return self.state

    @property
    def expanded(self) -> bool:
        return self.state is SectionState.EXPANDED

class AccordionView:
    """Sections built from one parse. A new parse means a new view."""

    def __init__(self, groups: Dict[str, BookGroup]):
        self.sections = [
            BookSection(title=group.title, author=group.author, highlights=list(group.highlights))
            for group in groups.values()
        ]

    def toggle(self, index: int) -> SectionState:
        """Toggles a single section. Raises IndexError for an unknown section."""
        if index < 0 or index >= len(self.sections):
            raise IndexError(f"No section {index}")
        return self.sections[index].toggle()

    def states(self) -> List[SectionState]:
        return [section.state for section in self.sections]

    def render(self) -> str:
        """Builds the HTML fragment for every section."""
        soup = BeautifulSoup("", "html.parser")
        for index, section in enumerate(self.sections):
            soup.append(_build_section(soup, index, section))
        return str(soup)

# --- Internal Helpers ---

def _build_section(soup: BeautifulSoup, index: int, section: BookSection):
    container = soup.new_tag("div", attrs={
        "class": "book-container",
        "data-section": str(index),
        "data-state": section.state.value,
    })

    # Clickable header with title and author
    header_class = "book-header active" if section.expanded else "book-header"
    header = soup.new_tag("div", attrs={"class": header_class})
    text_wrapper = soup.new_tag("div")

    title_el = soup.new_tag("h3", attrs={"class": "book-title"})
    title_el.string = section.title
    author_el = soup.new_tag("h4", attrs={"class": "book-author"})
    author_el.string = f"by {section.author}"

    text_wrapper.append(title_el)
    text_wrapper.append(author_el)
    header.append(text_wrapper)

    # The list of quotes, hidden until the header is activated
    list_attrs = {"class": "clippings-list"}
    if not section.expanded:
        list_attrs["hidden"] = ""
    clippings_list = soup.new_tag("div", attrs=list_attrs)

    for highlight in section.highlights:
        clippings_list.append(_build_quote(soup, highlight))

    container.append(header)
    container.append(clippings_list)
    return container

def _build_quote(soup: BeautifulSoup, highlight: Highlight):
    quote = soup.new_tag("blockquote", attrs={"class": "clipping-quote"})

    # Keep line breaks without trusting the content as HTML
    content_el = soup.new_tag("p")
    for i, line in enumerate(highlight.content.split("\n")):
        if i:
            content_el.append(soup.new_tag("br"))
        content_el.append(line)

    meta_el = soup.new_tag("small")
    meta_el.string = f"({highlight.meta_line})"

    quote.append(content_el)
    quote.append(meta_el)
    return quote
