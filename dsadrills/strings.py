"""Drills on strings and character sequences."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import MutableSequence


def to_lower(ch: str) -> str:
    """Lower-case an ASCII capital letter; other characters pass through."""
    if "A" <= ch <= "Z":
        return chr(ord(ch) - ord("A") + ord("a"))
    return ch


def _is_palindrome(text: str) -> bool:
    start, end = 0, len(text) - 1
    while start < end:
        if text[start] != text[end]:
            return False
        start += 1
        end -= 1
    return True


def is_palindrome_ignoring_case(text: str) -> bool:
    """Return True if ``text`` reads the same both ways, ignoring case."""
    return _is_palindrome("".join(to_lower(ch) for ch in text))


def _is_ascii_alnum(ch: str) -> bool:
    return ch in string.ascii_letters or ch in string.digits


def is_alnum_palindrome(text: str) -> bool:
    """Palindrome check over ASCII letters and digits only, ignoring case."""
    cleaned = "".join(to_lower(ch) for ch in text if _is_ascii_alnum(ch))
    return _is_palindrome(cleaned)


def max_occurring_char(text: str) -> str:
    """Return the most frequent lower-case letter; ties go to the earliest letter.

    An empty string yields ``'a'``.
    """
    invalid = set(text) - set(string.ascii_lowercase)
    if invalid:
        raise ValueError(f"only lower-case letters are allowed, got {sorted(invalid)!r}")
    counts = Counter(text)
    return max(string.ascii_lowercase, key=lambda letter: counts[letter])


def remove_occurrences(text: str, part: str) -> str:
    """Repeatedly remove the leftmost occurrence of ``part`` until none is left."""
    if not part:
        raise ValueError("part must not be empty")
    while part in text:
        text = text.replace(part, "", 1)
    return text


def replace_spaces(text: str) -> str:
    """Replace every space with ``@40``."""
    return text.replace(" ", "@40")


def reverse_chars(chars: MutableSequence[str]) -> None:
    """Reverse a list of characters in place."""
    start, end = 0, len(chars) - 1
    while start < end:
        chars[start], chars[end] = chars[end], chars[start]
        start += 1
        end -= 1


def min_bracket_reversals(text: str) -> int:
    """Return the fewest brace reversals that balance ``text``.

    Every character other than ``{`` counts as a closing brace. A string of
    odd length can never be balanced and raises ValueError.
    """
    if len(text) % 2 == 1:
        raise ValueError("an odd-length expression cannot be balanced")
    stack: list[str] = []
    for ch in text:
        if ch == "{":
            stack.append(ch)
        elif stack and stack[-1] == "{":
            stack.pop()
        else:
            stack.append(ch)
    opening = stack.count("{")
    closing = len(stack) - opening
    return (closing + 1) // 2 + (opening + 1) // 2