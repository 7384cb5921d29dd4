from __future__ import annotations
import json
import logging
import os
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Iterable, List, Optional

from . import config as CFG
from .models import Corpus, QuestionEntry

log = logging.getLogger(__name__)


def _verbose() -> bool:
    return os.environ.get(CFG.VERBOSE_ENV) == "1"


def parse_entries(data: Any) -> List[QuestionEntry]:
    """
    Validate decoded JSON and build entries.
    Expects a list of {"question": str, "variant": str}; anything else in the
    list is skipped with a warning. A non-list top level raises ValueError.
    """
    if not isinstance(data, list):
        raise ValueError(f"corpus must be a JSON array, got {type(data).__name__}")

    entries: List[QuestionEntry] = []
    skipped = 0
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            log.warning("Skipping corpus entry #%d: not an object", i)
            skipped += 1
            continue
        question = item.get("question")
        variant = item.get("variant")
        if not isinstance(question, str) or not isinstance(variant, str):
            log.warning("Skipping corpus entry #%d: 'question' and 'variant' must be strings", i)
            skipped += 1
            continue
        entries.append(QuestionEntry(question=question, variant=variant))

        if _verbose() and len(entries) % CFG.PROGRESS_EVERY_ENTRIES == 0:
            print(f"[parsed] entries={len(entries):,}")

    log.info("Parsed corpus: entries=%d skipped=%d", len(entries), skipped)
    return entries


def build_corpus(entries: Iterable[QuestionEntry]) -> Corpus:
    """Freeze entries and pre-tokenize their questions."""
    corpus = Corpus.from_entries(entries)
    if _verbose():
        print(f"[done] entries={len(corpus):,}")
    return corpus


def load_corpus(path: str | None = None) -> Corpus:
    """
    Read the JSON corpus at `path` (or $QNAMATCH_CORPUS, or ./qna.json).
    Any failure (missing file, bad JSON, wrong shape) is logged and yields
    an empty corpus.
    """
    path = CFG.corpus_path(path)
    log.info("Loading corpus from %s", path)
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            data = json.load(f)
        entries = parse_entries(data)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
        log.error("Error loading question data from %s: %s", path, e)
        return Corpus.empty()
    return build_corpus(entries)


class CorpusHandle:
    """
    One-shot corpus holder backed by a Future.

    Until the future resolves (or if it failed) `current()` returns the empty
    corpus, so callers can query right away without blocking.
    """

    def __init__(self, future: "Future[Corpus]") -> None:
        self._future = future

    @classmethod
    def resolved(cls, corpus: Corpus) -> "CorpusHandle":
        fut: Future[Corpus] = Future()
        fut.set_result(corpus)
        return cls(fut)

    @property
    def ready(self) -> bool:
        return self._future.done() and not self._future.cancelled() and self._future.exception() is None

    def current(self) -> Corpus:
        if not self.ready:
            return Corpus.empty()
        return self._future.result()

    def wait(self, timeout: Optional[float] = None) -> Corpus:
        """Block until loaded (or timeout); still returns the empty corpus on failure."""
        try:
            return self._future.result(timeout=timeout)
        except Exception as e:
            log.error("Corpus not available: %r", e)
            return Corpus.empty()


def load_corpus_async(path: str | None = None, *, executor: Optional[ThreadPoolExecutor] = None) -> CorpusHandle:
    """Start loading the corpus in the background and return its handle."""
    own = executor is None
    ex = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="qnamatch-loader")
    fut = ex.submit(load_corpus, path)
    if own:
        # the single task is already queued; let the worker exit when it is done
        ex.shutdown(wait=False)
    return CorpusHandle(fut)
