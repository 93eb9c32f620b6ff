"""Shell-like word splitting for lines typed into the interactive prompt."""

from __future__ import annotations

from typing import List

__all__ = ["split_line"]

QUOTE = '"'
ESCAPE = "\\"
WHITESPACE = (" ", "\t")


def split_line(line: str) -> List[str]:
    """Split ``line`` into words, honouring double quotes and backslash escapes.

    Whitespace inside quotes is kept; quote characters are dropped. A
    backslash makes the next character literal, inside or outside quotes.
    An unterminated quote is not an error: whatever was collected becomes
    the last word. Empty words are never produced, so ``""`` on its own
    yields nothing.
    """
    words: List[str] = []
    current: List[str] = []
    in_quotes = False
    escaping = False

    for char in line:
        if escaping:
            current.append(char)
            escaping = False
        elif char == ESCAPE:
            escaping = True
        elif char == QUOTE:
            in_quotes = not in_quotes
        elif char in WHITESPACE:
            if in_quotes:
                current.append(char)
            elif current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)

    if current:
        words.append("".join(current))
    return words
