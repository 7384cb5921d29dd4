from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple

from .normalize import TokenSet, text_tokens


@dataclass(frozen=True)
class QuestionEntry:
    question: str             # source question as shipped in the corpus
    variant: str              # answer value returned to callers


@dataclass(frozen=True)
class Corpus:
    """Immutable corpus with question token sets computed once at load time."""
    entries: Tuple[QuestionEntry, ...] = ()
    tokens: Tuple[TokenSet, ...] = field(default=(), repr=False)

    @classmethod
    def from_entries(cls, entries: Iterable[QuestionEntry]) -> "Corpus":
        items = tuple(entries)
        return cls(entries=items, tokens=tuple(text_tokens(e.question) for e in items))

    @classmethod
    def empty(cls) -> "Corpus":
        return _EMPTY

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Tuple[QuestionEntry, TokenSet]]:
        return iter(zip(self.entries, self.tokens))


_EMPTY = Corpus()


@dataclass(frozen=True)
class MatchCandidate:
    variant: str
    score: int                # 0..100


@dataclass(frozen=True)
class Answer:
    answer: List[str]         # ranked variants, best first, no repeats
    original_text: str        # query exactly as received

    def to_dict(self) -> dict:
        return {"answer": list(self.answer), "originalText": self.original_text}
