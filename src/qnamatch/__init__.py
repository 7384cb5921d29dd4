"""Public API for the question/answer matcher (safe to call before the corpus is loaded)."""
from __future__ import annotations
from typing import Optional

from .engine import Engine
from .models import Answer, Corpus, MatchCandidate, QuestionEntry

__all__ = [
    "Engine", "Answer", "Corpus", "MatchCandidate", "QuestionEntry",
    "initialize", "get_answer", "find_best_match",
]

_engine: Engine = Engine()


def initialize(path: str | None = None,
               background: bool = False,
               threshold: int | None = None,
               verbose: bool = False) -> Engine:
    """
    Load the corpus and make it the one behind get_answer()/find_best_match().
    With background=True the call returns immediately; queries see an empty
    corpus until loading finishes.
    """
    global _engine
    _engine = Engine.load(path, background=background, threshold=threshold, verbose=verbose)
    return _engine


def get_answer(text: str) -> Answer:
    """Ranked answer variants for `text` plus the text itself."""
    return _engine.get_answer(text)


def find_best_match(text: str) -> Optional[str]:
    """Top variant for `text`, or None."""
    return _engine.find_best_match(text)
