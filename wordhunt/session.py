from __future__ import annotations

import logging
import threading

from wordhunt.grid import Grid
from wordhunt.metrics import SolveMetrics
from wordhunt.solver import MIN_WORD_LENGTH, solve
from wordhunt.trie import Trie

logger = logging.getLogger("wordhunt")

ENTER = "enter"
BACKSPACE = "backspace"
ESCAPE = "escape"

DIVIDER = "─"


class Session:
    """Interactive front end around one grid and a loaded trie.

    Key events edit the grid or trigger a solve; the grid and trie are only
    touched through ``Grid.append``, ``Grid.remove_last`` and the solver.
    """

    def __init__(self, trie: Trie, min_length: int = MIN_WORD_LENGTH):
        self.trie = trie
        self.min_length = min_length
        self.grid = Grid()
        self.words: list[str] = []
        self.paths: dict[str, list[tuple[int, int]]] = {}
        self.last_metrics: SolveMetrics | None = None
        self.lock = threading.Lock()

    def handle_key(self, key: str) -> bool:
        """Apply one key event. Returns False when the session should end."""
        if key == ESCAPE:
            return False
        if key == ENTER:
            self.solve()
        elif key == BACKSPACE:
            with self.lock:
                self.grid.remove_last()
        elif len(key) == 1 and len(key.lower()) == 1:
            with self.lock:
                if not self.grid.append(key):
                    logger.debug("Ignoring %r, grid already has %d letters", key, len(self.grid))
        return True

    def solve(self, metrics: SolveMetrics | None = None) -> list[str]:
        if metrics is None:
            metrics = SolveMetrics()
        with self.lock:
            metrics.board = self.grid.letters
            with metrics.stage("search"):
                self.words, self.paths = solve(self.grid, self.trie, self.min_length)
        metrics.record_words(self.words)
        metrics.log()
        self.last_metrics = metrics
        return self.words

    def render(self, width: int, height: int) -> list[str]:
        """Screen lines: results, then a divider, then the typed letters."""
        shown = self.words[:max(height - 3, 0)]
        return [*shown, DIVIDER * width, self.grid.letters]
