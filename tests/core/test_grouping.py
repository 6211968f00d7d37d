from __future__ import annotations

from clippings_app.core.grouping import group_highlights, location_number
from clippings_app.core.models import Highlight
from clippings_app.core.parser import parse_clippings


def _highlight(title: str, location: str, author: str = "A", content: str = "text") -> Highlight:
    return Highlight(title=title, author=author, location=location, meta_line="meta", content=content)


def test_groups_follow_first_encounter_order() -> None:
    groups = group_highlights([
        _highlight("Second", "1-2"),
        _highlight("First", "1-2"),
        _highlight("Second", "3-4"),
    ])

    assert list(groups) == ["Second", "First"]
    assert len(groups["Second"].highlights) == 2


def test_highlights_are_sorted_numerically_by_start() -> None:
    groups = group_highlights([
        _highlight("Book", "100-101"),
        _highlight("Book", "9-10"),
        _highlight("Book", "25-30"),
    ])

    locations = [h.location for h in groups["Book"].highlights]
    assert locations == ["9-10", "25-30", "100-101"]
    numbers = [location_number(h) for h in groups["Book"].highlights]
    assert numbers == sorted(numbers)


def test_sort_is_stable_for_equal_starts() -> None:
    groups = group_highlights([
        _highlight("Book", "5-9", content="first"),
        _highlight("Book", "5-6", content="second"),
    ])

    assert [h.content for h in groups["Book"].highlights] == ["first", "second"]


def test_first_author_wins_for_a_title() -> None:
    groups = group_highlights([
        _highlight("Book", "1-2", author="Jane Doe"),
        _highlight("Book", "3-4", author="J. Doe"),
    ])

    assert groups["Book"].author == "Jane Doe"


def test_location_without_digits_sorts_first() -> None:
    assert location_number(_highlight("Book", "n/a")) == 0


def test_end_to_end_example_groups(sample_export: str) -> None:
    groups = group_highlights(parse_clippings(sample_export))

    assert list(groups) == ["Book One", "Other Book"]
    book_one = groups["Book One"]
    assert book_one.author == "Jane Doe"
    assert [h.location for h in book_one.highlights] == ["1-3", "10-12"]
    assert groups["Other Book"].author == "Unknown Author"
