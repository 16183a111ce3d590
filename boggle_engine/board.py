from __future__ import annotations

import math
from typing import Sequence

from boggle_engine.errors import InvalidInput

DEFAULT_TILES = ("E", "E", "C", "A", "A", "L", "E", "P", "H", "N", "B", "O", "Q", "T", "T", "Y")

# Row-major scan of the Moore neighbourhood
MOORE_STEPS = tuple((dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if dr or dc)

# Axis-aligned before diagonal; path lookup explores in this order
LOCATE_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1), (1, 1), (1, -1), (-1, 1), (-1, -1))


class Board:
    """An immutable N x N grid of tiles addressed by row-major index."""

    __slots__ = ("_n", "_tiles", "_adjacency")

    def __init__(self, tiles: Sequence[str], n: int):
        self._n = n
        self._tiles: tuple[str, ...] = tuple(tiles)
        self._adjacency: dict[tuple, list[list[int]]] = {
            MOORE_STEPS: self._build_adjacency(MOORE_STEPS),
            LOCATE_STEPS: self._build_adjacency(LOCATE_STEPS),
        }

    @classmethod
    def from_flat_array(cls, tiles: Sequence[str] | None) -> Board:
        if tiles is None:
            raise InvalidInput("board tiles are required")
        tiles = list(tiles)
        n = math.isqrt(len(tiles))
        if n <= 1 or n * n != len(tiles):
            raise InvalidInput(f"board needs N*N tiles with N >= 2, got {len(tiles)}")
        for idx, tile in enumerate(tiles):
            if not isinstance(tile, str) or not tile:
                raise InvalidInput(f"tile {idx} must be a non-empty string, got {tile!r}")
        return cls(tiles, n)

    @classmethod
    def default(cls) -> Board:
        return cls.from_flat_array(DEFAULT_TILES)

    def _build_adjacency(self, steps) -> list[list[int]]:
        n = self._n
        table: list[list[int]] = []
        for idx in range(n * n):
            r, c = divmod(idx, n)
            adj = []
            for dr, dc in steps:
                nr, nc = r + dr, c + dc
                if 0 <= nr < n and 0 <= nc < n:
                    adj.append(nr * n + nc)
            table.append(adj)
        return table

    @property
    def tiles(self) -> tuple[str, ...]:
        return self._tiles

    def size(self) -> int:
        return self._n

    def __len__(self) -> int:
        return len(self._tiles)

    def _check_index(self, index: int):
        if not 0 <= index < len(self._tiles):
            raise InvalidInput(f"cell index {index} outside board of {len(self._tiles)} cells")

    def tile_at(self, index: int) -> str:
        self._check_index(index)
        return self._tiles[index]

    def row_col(self, index: int) -> tuple[int, int]:
        self._check_index(index)
        return divmod(index, self._n)

    def index_of(self, row: int, col: int) -> int:
        if not (0 <= row < self._n and 0 <= col < self._n):
            raise InvalidInput(f"cell ({row}, {col}) outside {self._n}x{self._n} board")
        return row * self._n + col

    def neighbors(self, index: int, order=MOORE_STEPS) -> list[int]:
        """Return the in-bounds Moore neighbours of ``index``.

        ``order`` picks the enumeration order; it must be MOORE_STEPS or
        LOCATE_STEPS.
        """
        self._check_index(index)
        return list(self.adjacency(order)[index])

    def adjacency(self, order=MOORE_STEPS) -> list[list[int]]:
        return self._adjacency[order]

    def render(self) -> str:
        n = self._n
        rows = []
        for r in range(n):
            rows.append(" ".join(self._tiles[r * n:(r + 1) * n]) + "\n")
        return "".join(rows)

    def __repr__(self) -> str:
        return f"Board({self._n}x{self._n}, {list(self._tiles)!r})"
