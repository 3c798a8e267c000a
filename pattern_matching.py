from __future__ import annotations

from typing import Dict, List, Optional

from errors import InvalidArgumentError


BASE = 113


class CharacterComparator:
    """Compares single characters and counts how often it was asked to."""

    def __init__(self) -> None:
        self.comparison_count = 0

    def compare(self, a: str, b: str) -> int:
        self.comparison_count += 1
        return ord(a) - ord(b)

    __call__ = compare


def _check_search_inputs(
    pattern: Optional[str], text: Optional[str], comparator: Optional[CharacterComparator]
) -> None:
    if not pattern:
        raise InvalidArgumentError("Pattern cannot be None or empty.")
    if text is None or comparator is None:
        raise InvalidArgumentError("Text or comparator cannot be None.")


def build_failure_table(pattern: str, comparator: CharacterComparator) -> List[int]:
    """Failure function for KMP.

    ``table[i]`` is the length of the longest proper prefix of ``pattern[:i + 1]``
    that is also a suffix of it, e.g. ``"ababac"`` gives ``[0, 0, 1, 2, 3, 0]``.
    """
    if pattern is None or comparator is None:
        raise InvalidArgumentError("Pattern or comparator cannot be None.")

    table = [0] * len(pattern)
    prefix = 0
    query = 1
    while query < len(pattern):
        if comparator.compare(pattern[prefix], pattern[query]) == 0:
            prefix += 1
            table[query] = prefix
            query += 1
        elif prefix == 0:
            table[query] = 0
            query += 1
        else:
            prefix = table[prefix - 1]
    return table


def kmp(pattern: str, text: str, comparator: CharacterComparator) -> List[int]:
    """Knuth-Morris-Pratt search returning every match start index."""
    _check_search_inputs(pattern, text, comparator)

    matches: List[int] = []
    m, n = len(pattern), len(text)
    if m > n:
        return matches

    table = build_failure_table(pattern, comparator)
    p = t = 0
    while n - t >= m - p:
        if comparator.compare(pattern[p], text[t]) == 0:
            if p == m - 1:
                matches.append(t - p)
                p = table[m - 1]
            else:
                p += 1
            t += 1
        elif p == 0:
            t += 1
        else:
            p = table[p - 1]
    return matches


def build_last_table(pattern: str) -> Dict[str, int]:
    """Last index of every character in ``pattern``; absent characters mean -1."""
    if pattern is None:
        raise InvalidArgumentError("Pattern cannot be None.")
    return {char: index for index, char in enumerate(pattern)}


def boyer_moore(pattern: str, text: str, comparator: CharacterComparator) -> List[int]:
    """Boyer-Moore search with the bad-character (last occurrence) rule."""
    _check_search_inputs(pattern, text, comparator)

    matches: List[int] = []
    m, n = len(pattern), len(text)
    if m > n:
        return matches

    last = build_last_table(pattern)
    index = 0
    while index <= n - m:
        j = m - 1
        while j >= 0 and comparator.compare(text[index + j], pattern[j]) == 0:
            j -= 1
        if j == -1:
            matches.append(index)
            index += 1
        else:
            shift = last.get(text[index + j], -1)
            index += j - shift if shift < j else 1
    return matches


def boyer_moore_galil_rule(pattern: str, text: str, comparator: CharacterComparator) -> List[int]:
    """Boyer-Moore with the Galil rule.

    After a full match the pattern moves by its period, and the following
    attempt stops comparing once it reaches the overlap already known to match.
    """
    _check_search_inputs(pattern, text, comparator)

    matches: List[int] = []
    m, n = len(pattern), len(text)
    if m > n:
        return matches

    last = build_last_table(pattern)
    failure = build_failure_table(pattern, comparator)
    period = m - failure[m - 1]
    index = 0
    after_match = False
    while index <= n - m:
        j = m - 1
        while j >= 0 and comparator.compare(text[index + j], pattern[j]) == 0:
            if after_match and j == m - period:
                j = -1
                break
            j -= 1
        if j == -1:
            matches.append(index)
            after_match = True
            index += period
        else:
            shift = last.get(text[index + j], -1)
            index += j - shift if shift < j else 1
            after_match = False
    return matches


def rabin_karp(pattern: str, text: str, comparator: CharacterComparator) -> List[int]:
    """Rabin-Karp search with a polynomial rolling hash in ``BASE``.

    ``hash(s) = sum(ord(c) * BASE ** (m - 1 - i))``. Characters are compared
    front to back, and only when the window hash equals the pattern hash.
    """
    _check_search_inputs(pattern, text, comparator)

    matches: List[int] = []
    m, n = len(pattern), len(text)
    if m > n:
        return matches

    pattern_hash = 0
    text_hash = 0
    for i in range(m):
        pattern_hash = pattern_hash * BASE + ord(pattern[i])
        text_hash = text_hash * BASE + ord(text[i])
    top_power = BASE ** (m - 1)

    for start in range(n - m + 1):
        if pattern_hash == text_hash:
            i = 0
            while i < m and comparator.compare(pattern[i], text[start + i]) == 0:
                i += 1
            if i == m:
                matches.append(start)
        if start < n - m:
            text_hash = (text_hash - ord(text[start]) * top_power) * BASE + ord(text[start + m])
    return matches
