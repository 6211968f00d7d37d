from typing import Dict

from clippings_app.core.models import BookGroup, Highlight

DOCUMENT_TITLE = "My Kindle Highlights"
GROUP_SEPARATOR = "----"

def format_as_markdown(groups: Dict[str, BookGroup]) -> str:
    """Renders the grouped highlights as one Markdown document."""
    parts = [f"# {DOCUMENT_TITLE}\n\n"]

    for group in groups.values():
        parts.append(f"## {group.title}\n")
        parts.append(f"### by {group.author}\n\n")

        for highlight in group.highlights:
            parts.append(format_quote(highlight))

        # Separator after every book, the last one included
        parts.append(f"{GROUP_SEPARATOR}\n\n")

    return "".join(parts)

def format_quote(highlight: Highlight) -> str:
    """Quotes every line of the content, then the metadata in parentheses."""
    quoted = highlight.content.replace("\n", "\n> ")
    return f"> {quoted}\n> ({highlight.meta_line})\n\n"
