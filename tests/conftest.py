from __future__ import annotations

import pytest


def make_block(title_line: str, meta_line: str, *content: str) -> str:
    body = "\n".join(content)
    return f"{title_line}\n{meta_line}\n\n{body}\n==========\n"


@pytest.fixture
def sample_export() -> str:
    return (
        make_block(
            "\ufeffBook One (Jane Doe)",
            "- Your Highlight at location 10-12 | Added on Monday, 1 January 2024 10:00:00",
            "First highlight text",
        )
        + make_block(
            "Book One (Jane Doe)",
            "- Your Highlight at location 1-3 | Added on Monday, 1 January 2024 10:05:00",
            "Second highlight text",
        )
        + make_block(
            "Book One (Jane Doe)",
            "- Your Bookmark at location 42 | Added on Monday, 1 January 2024 10:06:00",
        )
        + make_block(
            "Book One (Jane Doe)",
            "- Your Note at location 12 | Added on Monday, 1 January 2024 10:07:00",
            "A note, not a highlight",
        )
        + make_block(
            "Other Book",
            "- Your Highlight on page 5 | location 200-201 | Added on Tuesday, 2 January 2024 09:00:00",
            "Line one",
            "Line two",
        )
    )
