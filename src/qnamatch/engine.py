# qnamatch/engine.py
from __future__ import annotations

import os
import logging
from typing import List, Optional, Union

from . import config as CFG
from .models import Answer, Corpus, MatchCandidate
from .loader import CorpusHandle, load_corpus, load_corpus_async
from . import search

log = logging.getLogger(__name__)

CorpusSource = Union[Corpus, CorpusHandle, None]


class Engine:
    """
    Thin orchestration layer that glues together:
      - a corpus source (a loaded Corpus or a CorpusHandle still loading),
      - the match pipeline (search.find_all_matches -> ranking).

    Public API (used by CLI/Flask):
      * load(path, background=...): build an Engine from the JSON corpus
      * find_all_matches(text):     ranked, deduplicated candidates
      * find_best_match(text):      top variant or None
      * get_answer(text):           Answer(answer=[...], original_text=text)
      * shutdown():                 drop the corpus

    Queries made before the corpus is available behave as against an empty
    corpus. The engine keeps no per-query state, so it can be shared by threads.
    """

    # ------------- lifecycle -------------

    def __init__(self, corpus: CorpusSource = None, *, threshold: Optional[int] = None) -> None:
        if corpus is None:
            corpus = Corpus.empty()
        if isinstance(corpus, Corpus):
            corpus = CorpusHandle.resolved(corpus)
        self._handle: Optional[CorpusHandle] = corpus
        self.threshold: int = CFG.check_threshold(CFG.THRESHOLD if threshold is None else threshold)

    # /* ~~~ Build an engine from the JSON corpus resource ~~~ */
    @classmethod
    def load(
        cls,
        path: Optional[str] = None,
        *,
        background: bool = False,
        threshold: Optional[int] = None,
        verbose: bool = False,
    ) -> "Engine":
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ[CFG.VERBOSE_ENV] = "1"

        if background:
            log.info("Loading corpus in background")
            return cls(load_corpus_async(path), threshold=threshold)

        corpus = load_corpus(path)
        eng = cls(corpus, threshold=threshold)
        log.info("Engine load() complete: entries=%d", len(corpus))
        return eng

    # ------------- state -------------

    @property
    def corpus(self) -> Corpus:
        if self._handle is None:
            return Corpus.empty()
        return self._handle.current()

    @property
    def ready(self) -> bool:
        return self._handle is not None and self._handle.ready

    @property
    def size(self) -> int:
        return len(self.corpus)

    def wait(self, timeout: Optional[float] = None) -> int:
        """Block until the corpus is available; returns its size."""
        if self._handle is None:
            return 0
        return len(self._handle.wait(timeout))

    # ------------- query -------------

    # /* ~~~ Ranked candidates for a free-form query ~~~ */
    def find_all_matches(self, text: str) -> List[MatchCandidate]:
        return search.find_all_matches(text, self.corpus, self.threshold)

    def find_best_match(self, text: str) -> Optional[str]:
        return search.find_best_match(text, self.corpus, self.threshold)

    def get_answer(self, text: str) -> Answer:
        matches = self.find_all_matches(text)
        return Answer(answer=[m.variant for m in matches], original_text=text)

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self._handle = None
        log.info("Engine shutdown complete")
