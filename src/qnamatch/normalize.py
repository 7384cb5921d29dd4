from __future__ import annotations
import unicodedata
from typing import FrozenSet, List

TokenSet = FrozenSet[str]


def _is_word_char(ch: str) -> bool:
    """Letters (L*) and numbers (N*) are kept. Symbols/punctuation/marks are removed from matching."""
    return unicodedata.category(ch)[0] in "LN"


def normalize_text(text: str) -> str:
    """
    Normalize text for matching:
      * drop everything that is not a letter, a number or whitespace
      * casefold (full Unicode case folding)
      * collapse whitespace runs into one ' ' and trim
    Folding can expand a char into several (e.g. 'İ' -> 'i' + U+0307); the
    expansion is filtered with the same rule so normalize(normalize(x)) == normalize(x).
    """
    out_chars: list[str] = []
    last_was_space = False

    for ch in text:
        if ch.isspace():
            last_was_space = True
            continue

        if not _is_word_char(ch):
            # punctuation/symbol: drop, but do not break space runs
            continue

        folded = [f for f in ch.casefold() if _is_word_char(f)]
        if not folded:
            continue
        # flush one collapsed space before a word char (not at start)
        if last_was_space and out_chars:
            out_chars.append(" ")
        last_was_space = False
        out_chars.extend(folded)

    return "".join(out_chars)


def tokenize(normalized: str) -> TokenSet:
    """Distinct tokens of already-normalized text ('' -> empty set)."""
    if not normalized:
        return frozenset()
    return frozenset(normalized.split(" "))


def text_tokens(text: str) -> TokenSet:
    """Convenience: normalize raw text and tokenize it."""
    return tokenize(normalize_text(text))


def sorted_tokens(tokens: TokenSet) -> List[str]:
    """Canonical token order, used for echo/debug output only."""
    return sorted(tokens)
