from __future__ import annotations
from typing import List, Optional

from .config import THRESHOLD, check_threshold
from .models import Corpus, MatchCandidate
from .normalize import text_tokens
from .ranking import order_candidates
from .scoring import token_set_similarity


def collect_candidates(query: str, corpus: Corpus, threshold: int = THRESHOLD) -> List[MatchCandidate]:
    """
    Score every corpus entry against the query and keep those with
    score > threshold (strict). Corpus order, one candidate per entry;
    the same variant may show up more than once.
    """
    threshold = check_threshold(threshold)
    q_tokens = text_tokens(query)
    if not q_tokens:
        # empty/punctuation-only query scores 0 against everything
        return []

    rows: List[MatchCandidate] = []
    for entry, tokens in corpus:
        score = token_set_similarity(q_tokens, tokens)
        if score > threshold:
            rows.append(MatchCandidate(variant=entry.variant, score=score))
    return rows


def find_all_matches(query: str, corpus: Corpus, threshold: int = THRESHOLD) -> List[MatchCandidate]:
    """Best-first matches, at most one per variant."""
    return order_candidates(collect_candidates(query, corpus, threshold))


def find_best_match(query: str, corpus: Corpus, threshold: int = THRESHOLD) -> Optional[str]:
    matches = find_all_matches(query, corpus, threshold)
    return matches[0].variant if matches else None
