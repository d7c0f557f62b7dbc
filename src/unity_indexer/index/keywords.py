"""Search keywords for a function.

A cheap bag of lowercase tokens taken from the function name and its
comments. No stemming, no stop words: consumers treat it as approximate.
"""

from __future__ import annotations

from collections.abc import Iterable


def split_camel_case(name: str) -> list[str]:
    """Split an identifier before every uppercase letter except the first.

    Examples:
        MovePlayer -> ["move", "player"]
        OnGUI -> ["on", "g", "u", "i"]
        update -> ["update"]
    """
    words: list[str] = []
    current: list[str] = []
    for i, ch in enumerate(name):
        if i > 0 and ch.isupper() and current:
            words.append("".join(current).lower())
            current = []
        current.append(ch)
    if current:
        words.append("".join(current).lower())
    return words


def derive_keywords(function_name: str, comment_lines: Iterable[str]) -> list[str]:
    """Keywords from the name segments followed by the comment tokens.

    Comment tokens that encode to a single UTF-8 byte are dropped, so "a" goes
    but a lone CJK character such as "跳" stays. The result keeps
    first-seen order and holds no empty or case-insensitively repeated entry.
    """
    candidates = split_camel_case(function_name)
    text = " ".join(comment_lines)
    candidates.extend(token.lower() for token in text.split() if len(token.encode("utf-8")) > 1)

    seen: set[str] = set()
    keywords: list[str] = []
    for word in candidates:
        key = word.lower()
        if not key or key in seen:
            continue
        seen.add(key)
        keywords.append(key)
    return keywords
