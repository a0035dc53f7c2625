"""Small algorithms over character strings."""

from __future__ import annotations

import string
from collections import Counter

_ALNUM = frozenset(string.ascii_letters + string.digits)


def string_length(text: str) -> int:
    """Number of characters before the first NUL character (or the whole text)."""
    return len(text.partition("\0")[0])


def max_occurring_char(text: str) -> str:
    """The most frequent ASCII letter, ignoring case, returned in lower case.

    Ties go to the letter earliest in the alphabet. Characters other than
    ASCII letters are not counted. Raises ValueError if there are no letters.
    """
    counts = Counter(ch.lower() for ch in text if ch in string.ascii_letters)
    if not counts:
        raise ValueError("text contains no letters")
    return min(counts, key=lambda letter: (-counts[letter], letter))


def is_alnum_palindrome(text: str) -> bool:
    """True if the text reads the same both ways, looking only at ASCII
    letters and digits and ignoring case."""
    cleaned = [ch.lower() for ch in text if ch in _ALNUM]
    return cleaned == cleaned[::-1]


def remove_stars(text: str) -> str:
    """Each '*' removes the closest kept character to its left, and itself."""
    kept: list[str] = []
    for ch in text:
        if ch != "*":
            kept.append(ch)
        elif kept:
            kept.pop()
    return "".join(kept)


def reverse_string(text: str) -> str:
    """The characters of ``text`` in reverse order."""
    return text[::-1]


def reverse_words(line: str) -> str:
    """Reverse every space-separated word in place.

    Each word in the result is followed by one space, so the result ends
    with a space whenever the line is not empty.
    """
    if not line:
        return ""
    words = line.split(" ")
    if line.endswith(" "):
        words.pop()
    return "".join(word[::-1] + " " for word in words)