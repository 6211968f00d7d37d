from typing import List, Dict

from clippings_app.core.models import Highlight, BookGroup
from clippings_app.utils.text import first_number

def group_highlights(highlights: List[Highlight]) -> Dict[str, BookGroup]:
    """
    Groups highlights by book title and sorts each book by location.

    The returned dict enumerates books in the order their title was first
    seen. The first highlight of a title decides the author of the group;
    later highlights with a different author do not change it.
    """
    groups: Dict[str, BookGroup] = {}
    for highlight in highlights:
        group = groups.get(highlight.title)
        if group is None:
            group = BookGroup(title=highlight.title, author=highlight.author)
            groups[highlight.title] = group
        group.highlights.append(highlight)

    for group in groups.values():
        # sort() is stable: equal locations keep their input order
        group.highlights.sort(key=location_number)
    return groups

def location_number(highlight: Highlight) -> int:
    """Sort key: the start of the location range ('1035-1036' -> 1035)."""
    return first_number(highlight.location)
