from __future__ import annotations
import unicodedata
from typing import Iterable, List, Tuple

from .models import MatchCandidate


def collation_key(text: str) -> Tuple[str, str, str]:
    """
    Locale-independent approximation of the Unicode default collation:
      1) base letters: NFKD with combining marks stripped, casefolded
      2) casefolded text (accents break ties)
      3) raw code points (case breaks the remaining ties)
    e.g. "apple" < "Banana", "eclair" < "éclair" < "eclairs".
    """
    folded = text.casefold()
    decomposed = unicodedata.normalize("NFKD", folded)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base, folded, text


def _sort_key(c: MatchCandidate) -> tuple:
    return (-c.score, collation_key(c.variant))


def order_candidates(candidates: Iterable[MatchCandidate]) -> List[MatchCandidate]:
    """
    Sort best-first (score desc, then variant asc by collation) and keep only
    the first occurrence of each variant.
    """
    seen: set[str] = set()
    out: List[MatchCandidate] = []
    for c in sorted(candidates, key=_sort_key):
        if c.variant in seen:
            continue
        seen.add(c.variant)
        out.append(c)
    return out


def rank(candidates: Iterable[MatchCandidate]) -> List[str]:
    """Ranked, deduplicated variants."""
    return [c.variant for c in order_candidates(candidates)]
