from __future__ import annotations

from wordhunt.grid import BLANK, SIZE, Grid
from wordhunt.trie import Trie, TrieNode

MIN_WORD_LENGTH = 3

OFFSETS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]


def _search(grid: Grid, trie: Trie, min_length: int) -> dict[str, list[tuple[int, int]]]:
    """Run a trie-pruned DFS from every cell of the grid.

    Returns each word found mapped to the first path that spells it, with
    start cells tried in row-major order.
    """
    found: dict[str, list[tuple[int, int]]] = {}
    visited = [[False] * SIZE for _ in range(SIZE)]
    path: list[str] = []
    cells: list[tuple[int, int]] = []

    def dfs(row: int, col: int, node: TrieNode):
        ch = grid.get(row, col)
        if ch is None or ch == BLANK or visited[row][col]:
            return

        current = node.child(ch)
        if current is None:
            return

        visited[row][col] = True
        path.append(ch)
        cells.append((row, col))
        try:
            if current.is_word and len(path) >= min_length:
                word = "".join(path)
                if word not in found:
                    found[word] = list(cells)

            if current.children:  # no word continues past a leaf
                for dr, dc in OFFSETS:
                    dfs(row + dr, col + dc, current)
        finally:
            cells.pop()
            path.pop()
            visited[row][col] = False

    for r in range(SIZE):
        for c in range(SIZE):
            dfs(r, c, trie.root)

    return found


def solve(grid: Grid, trie: Trie, min_length: int = MIN_WORD_LENGTH) -> tuple[list[str], dict[str, list[tuple[int, int]]]]:
    """Returns (words, paths) where paths maps each word to the cells of
    the first path found for it.
    """
    found = _search(grid, trie, min_length)
    # Sort: longest first, then alphabetical
    return sorted(found, key=lambda w: (-len(w), w)), found


def find_words(grid: Grid, trie: Trie, min_length: int = MIN_WORD_LENGTH) -> list[str]:
    """Find every dictionary word traceable on the grid.

    Words are unique, at least ``min_length`` long, and sorted longest first,
    then alphabetically.
    """
    words, _ = solve(grid, trie, min_length)
    return words
