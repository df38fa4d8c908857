"""Fuzzy scoring and filtering of candidate strings."""

from __future__ import annotations

from collections.abc import Sequence

_CONSECUTIVE_BONUS = 3
_WORD_START_BONUS = 2


def fuzzy_match(needle: str, haystack: str) -> int:
    """Score how well ``needle`` matches ``haystack``; 0 means no match.

    Each character of ``needle`` must appear in ``haystack`` in order.
    Every matched character scores one point, with a bonus when it directly
    follows the previous match and another when it starts a word.
    Both arguments are compared exactly; callers lower-case them first.
    """
    score = 0
    needle_idx = 0
    last_match = -1

    for i, char in enumerate(haystack):
        if needle_idx >= len(needle):
            break
        if char != needle[needle_idx]:
            continue
        score += 1
        if last_match != -1 and i == last_match + 1:
            score += _CONSECUTIVE_BONUS
        if i == 0 or haystack[i - 1] == " ":
            score += _WORD_START_BONUS
        last_match = i
        needle_idx += 1

    if needle_idx != len(needle):
        return 0
    return score


def fuzzy_find(needle: str, haystack: Sequence[str]) -> Sequence[str]:
    """Return the entries of ``haystack`` that match ``needle``, best first.

    Matching ignores case. An empty needle returns ``haystack`` unchanged.
    Entries with equal scores keep their original relative order.
    """
    if not needle:
        return haystack

    needle = needle.lower()
    scored = [
        (score, item)
        for item in haystack
        if (score := fuzzy_match(needle, item.lower())) > 0
    ]
    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [item for _, item in scored]