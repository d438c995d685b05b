import logging
import time
from collections import Counter
from contextlib import contextmanager

logger = logging.getLogger("wordhunt")


class SolveMetrics:
    """What one solve saw and produced: the board, the words found and how
    long each stage took."""

    def __init__(self, board: str = ""):
        self.board = board
        self.timings: dict[str, float] = {}
        self.word_count = 0
        self.longest = ""
        self.by_length: dict[int, int] = {}
        self._start = time.perf_counter()

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.timings[name] = round((time.perf_counter() - t0) * 1000, 1)  # ms
            logger.debug("board=%s stage=%s elapsed=%.1fms", self.board, name, self.timings[name])

    def record_words(self, words: list[str]):
        """Takes the solver's ordered result, longest word first."""
        self.word_count = len(words)
        self.longest = words[0] if words else ""
        self.by_length = dict(sorted(Counter(len(w) for w in words).items(), reverse=True))

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def log(self):
        logger.info(
            "board=%s words=%d longest=%s stages=%s total=%.1fms",
            self.board or "-", self.word_count, self.longest or "-", self.timings, self.total_ms,
        )

    def summary(self) -> dict:
        return {
            "board": self.board,
            "word_count": self.word_count,
            "longest": self.longest,
            "by_length": self.by_length,
            "stages": dict(self.timings),
            "total_ms": self.total_ms,
        }
