"""Small string utilities: anagram and palindrome checks, reversal and slicing."""

from __future__ import annotations

from typing import Optional


def is_anagram(first: str, second: str) -> bool:
    """Return True when both strings hold the same characters in any order."""
    return sorted(first) == sorted(second)


def is_palindrome(text: str) -> bool:
    """Return True when ``text`` reads the same forwards and backwards."""
    half = len(text) // 2
    return all(a == b for a, b in zip(text[:half], reversed(text)))


def reverse(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def remove_spaces(text: str) -> str:
    """Return ``text`` with every space character removed."""
    return text.replace(" ", "")


def substring(text: str, start: int, length: Optional[int] = None) -> str:
    """Return up to ``length`` characters of ``text`` starting at ``start``.

    With no ``length`` the rest of the string is returned. A start past
    the end of the string is an error; a start exactly at the end gives
    an empty string.
    """
    if start < 0 or start > len(text):
        raise IndexError(f"start {start} is out of range for a string of length {len(text)}")
    if length is None:
        return text[start:]
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    return text[start:start + length]


def find(text: str, pattern: str) -> int:
    """Return the index of the first occurrence of ``pattern``, or -1 if absent."""
    return text.find(pattern)


def concatenate(*args: str) -> str:
    """Join all given strings end to end."""
    return "".join(args)