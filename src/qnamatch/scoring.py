from __future__ import annotations
from typing import AbstractSet

from .config import MAX_SCORE


def token_set_similarity(a: AbstractSet[str], b: AbstractSet[str]) -> int:
    """
    Jaccard similarity of two token sets scaled to 0..100.

    |A & B| / |A | B| * 100, rounded half-up in integer arithmetic
    (so 2/3 -> 67 and 1/8 -> 13, never a float artefact).
    Empty union (both sets empty) scores 0.
    """
    union = len(a | b)
    if union == 0:
        return 0
    inter = len(a & b)
    return (2 * MAX_SCORE * inter + union) // (2 * union)
