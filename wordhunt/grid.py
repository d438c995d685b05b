from __future__ import annotations

import logging

logger = logging.getLogger("wordhunt")

SIZE = 4
CAPACITY = SIZE * SIZE
BLANK = ""


class Grid:
    """A 4x4 board filled in row-major order, one letter at a time.

    Only the trailing letter can be removed, so the filled cells are always
    the first ``len(grid)`` cells in row-major order.
    """

    def __init__(self):
        self._cells: list[list[str]] = [[BLANK] * SIZE for _ in range(SIZE)]
        self._letters: list[str] = []

    @classmethod
    def from_letters(cls, text: str) -> Grid:
        grid = cls()
        for ch in text:
            if not grid.append(ch):
                break
        return grid

    def append(self, ch: str) -> bool:
        """Place ``ch`` in the next free cell. Returns False if the grid is full."""
        letter = ch.lower()
        if len(ch) != 1 or len(letter) != 1:
            raise ValueError(f"Expected a single character, got {ch!r}")
        if self.is_full:
            logger.debug("Grid full, rejected %r", ch)
            return False
        ch = letter
        row, col = divmod(len(self._letters), SIZE)
        self._cells[row][col] = ch
        self._letters.append(ch)
        return True

    def remove_last(self) -> str | None:
        if not self._letters:
            return None
        ch = self._letters.pop()
        row, col = divmod(len(self._letters), SIZE)
        self._cells[row][col] = BLANK
        return ch

    def clear(self):
        while self._letters:
            self.remove_last()

    def get(self, row: int, col: int) -> str | None:
        if 0 <= row < SIZE and 0 <= col < SIZE:
            return self._cells[row][col]
        return None

    @property
    def letters(self) -> str:
        return "".join(self._letters)

    @property
    def is_full(self) -> bool:
        return len(self._letters) >= CAPACITY

    def rows(self) -> list[list[str]]:
        return [list(row) for row in self._cells]

    def __len__(self) -> int:
        return len(self._letters)

    def __repr__(self) -> str:
        return f"Grid({self.letters!r})"
