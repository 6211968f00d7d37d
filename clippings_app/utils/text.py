import re
from typing import List

# The characters JavaScript's trim() removes: ECMAScript white space (the
# byte-order mark Kindle puts before titles included) and line terminators.
# Python's str.isspace() also accepts \x1c-\x1f and \x85, which trim() keeps.
_TRIM_CHARS = (
    '\t\n\x0b\x0c\r \xa0\u1680'
    '\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a'
    '\u2028\u2029\u202f\u205f\u3000\ufeff'
)
_FIRST_NUMBER_PATTERN = re.compile(r'\d+', re.ASCII)

def normalize_line_endings(text: str) -> str:
    """Converts Windows line endings to Unix ones. Lone '\\r' is left alone."""
    return text.replace('\r\n', '\n')

def trim(text: str) -> str:
    """Strips whitespace and byte-order marks from both ends."""
    return text.strip(_TRIM_CHARS)

def clean_lines(block: str) -> List[str]:
    """
    Splits a block into trimmed lines, dropping the empty ones.
    """
    lines = [trim(line) for line in trim(block).split('\n')]
    return [line for line in lines if line]

def first_number(text: str) -> int:
    """Returns the first run of digits as an int, or 0 if there is none."""
    match = _FIRST_NUMBER_PATTERN.search(text)
    if not match:
        return 0
    return int(match.group(0))
