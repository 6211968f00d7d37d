from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from clippings_app.core.grouping import group_highlights
from clippings_app.core.models import Highlight
from clippings_app.core.parser import parse_clippings
from clippings_app.core.view import AccordionView, BookSection, SectionState


def _view(sample_export: str) -> AccordionView:
    return AccordionView(group_highlights(parse_clippings(sample_export)))


def test_sections_start_collapsed(sample_export: str) -> None:
    view = _view(sample_export)

    assert [s.title for s in view.sections] == ["Book One", "Other Book"]
    assert view.states() == [SectionState.COLLAPSED, SectionState.COLLAPSED]


def test_toggle_flips_only_the_activated_section(sample_export: str) -> None:
    view = _view(sample_export)

    assert view.toggle(1) is SectionState.EXPANDED
    assert view.states() == [SectionState.COLLAPSED, SectionState.EXPANDED]

    assert view.toggle(1) is SectionState.COLLAPSED
    assert view.states() == [SectionState.COLLAPSED, SectionState.COLLAPSED]


def test_toggle_unknown_section_raises(sample_export: str) -> None:
    view = _view(sample_export)

    with pytest.raises(IndexError):
        view.toggle(2)
    with pytest.raises(IndexError):
        view.toggle(-1)


def test_book_section_state_machine() -> None:
    section = BookSection(title="T", author="A")

    assert section.state is SectionState.COLLAPSED
    assert section.toggle() is SectionState.EXPANDED
    assert section.expanded
    assert section.toggle() is SectionState.COLLAPSED


def test_render_builds_one_container_per_book(sample_export: str) -> None:
    view = _view(sample_export)
    view.toggle(0)

    soup = BeautifulSoup(view.render(), "html.parser")
    containers = soup.select("div.book-container")

    assert [c["data-state"] for c in containers] == ["expanded", "collapsed"]
    assert containers[0].select_one("h3.book-title").get_text() == "Book One"
    assert containers[0].select_one("h4.book-author").get_text() == "by Jane Doe"
    assert "active" in containers[0].select_one("div.book-header")["class"]
    assert not containers[0].select_one("div.clippings-list").has_attr("hidden")
    assert containers[1].select_one("div.clippings-list").has_attr("hidden")

    quotes = containers[1].select("blockquote.clipping-quote")
    assert len(quotes) == 1
    assert len(quotes[0].find("p").find_all("br")) == 1
    assert quotes[0].find("small").get_text().startswith("(Your Highlight on page 5")


def test_render_escapes_highlight_text() -> None:
    highlight = Highlight(title="<b>T</b>", author="A", location="1-2", meta_line="m", content="x < y & <script>")
    view = AccordionView(group_highlights([highlight]))

    html = view.render()

    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "&lt;b&gt;T&lt;/b&gt;" in html


def test_empty_view_renders_nothing() -> None:
    assert AccordionView({}).render() == ""
