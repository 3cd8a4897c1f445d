from __future__ import annotations

import re


# Unicode whitespace, minus the information separators U+001C..U+001F that
# str.isspace() also accepts
_re_whitespace = re.compile(r"[^\S\x1c-\x1f]+")


def normalize_term(word: str) -> str:
    """Lowercase and drop every non-alphanumeric character (Unicode aware)."""
    return "".join(ch for ch in word.lower() if ch.isalnum())


def tokenize(text: str) -> list[str]:
    """Split on whitespace and normalize each word.

    Words made only of punctuation disappear. Order and duplicates are kept.
    """
    terms: list[str] = []
    for word in _re_whitespace.split(text):
        term = normalize_term(word)
        if term:
            terms.append(term)
    return terms
