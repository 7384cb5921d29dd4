from __future__ import annotations
import os

# Minimum similarity (exclusive) for a corpus entry to count as a match
THRESHOLD: int = 65

# Score scale produced by the scorer
MAX_SCORE: int = 100

# Corpus resource location: explicit path > env var > default file name
CORPUS_ENV: str = "QNAMATCH_CORPUS"
DEFAULT_CORPUS_PATH: str = "qna.json"

# Progress logging (set QNAMATCH_VERBOSE=1 to enable)
VERBOSE_ENV: str = "QNAMATCH_VERBOSE"
PROGRESS_EVERY_ENTRIES: int = 10_000


def corpus_path(path: str | None = None) -> str:
    """Resolve the corpus location: argument, then $QNAMATCH_CORPUS, then ./qna.json."""
    if path:
        return path
    return os.environ.get(CORPUS_ENV) or DEFAULT_CORPUS_PATH


def check_threshold(threshold: int) -> int:
    threshold = int(threshold)
    if not 0 <= threshold <= MAX_SCORE:
        raise ValueError(f"threshold must be within 0..{MAX_SCORE}, got {threshold}")
    return threshold
