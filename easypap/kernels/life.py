"""Conway's game of life on a table of cells rendered into the image."""

from __future__ import annotations

import random

from easypap.image import Image

LIVING_COLOR = 0xFFFF00FF


class LifeKernel:
    """Game of life; border cells are never updated."""

    def __init__(self, image: Image):
        self.image = image
        size = image.dim * image.dim
        self._table = [0] * size
        self._alternate = [0] * size

    def refresh_img(self) -> None:
        """Paint living cells yellow and dead ones transparent black."""
        img = self.image
        dim = img.dim
        for i in range(dim):
            for j in range(dim):
                img[i, j] = self._table[i * dim + j] * LIVING_COLOR

    def set_cell(self, y: int, x: int) -> None:
        self._table[self._offset(y, x)] = 1

    def get_cell(self, y: int, x: int) -> int:
        return self._table[self._offset(y, x)]

    def _offset(self, y: int, x: int) -> int:
        dim = self.image.dim
        if not (0 <= y < dim and 0 <= x < dim):
            raise IndexError(f"cell ({y}, {x}) outside a {dim}x{dim} table")
        return y * dim + x

    def _swap_tables(self) -> None:
        self._table, self._alternate = self._alternate, self._table

    def _compute_new_state(self, y: int, x: int) -> bool:
        dim = self.image.dim
        if not (0 < x < dim - 1 and 0 < y < dim - 1):
            return False
        cur = self._table
        me = 1 if cur[y * dim + x] else 0
        n = sum(
            cur[i * dim + j] for i in range(y - 1, y + 2) for j in range(x - 1, x + 2)
        )
        alive = 1 if (n == 3 + me or n == 3) else 0
        self._alternate[y * dim + x] = alive
        return alive != me

    def _do_tile(self, x: int, y: int, width: int, height: int) -> bool:
        change = False
        for i in range(y, y + height):
            for j in range(x, x + width):
                if self._compute_new_state(i, j):
                    change = True
        return change

    def compute_seq(self, nb_iter: int) -> int:
        dim = self.image.dim
        for it in range(1, nb_iter + 1):
            change = self._do_tile(0, 0, dim, dim)
            self._swap_tables()
            if not change:
                return it
        return 0

    def compute_tiled(self, nb_iter: int) -> int:
        for it in range(1, nb_iter + 1):
            change = False
            for x, y, w, h in self.image.tiles():
                if self._do_tile(x, y, w, h):
                    change = True
            self._swap_tables()
            if not change:
                return it
        return 0

    def draw_stable(self) -> None:
        """Fill the board with 2x2 blocks, a still life."""
        dim = self.image.dim
        for i in range(1, dim - 2, 4):
            for j in range(1, dim - 2, 4):
                self.set_cell(i, j)
                self.set_cell(i, j + 1)
                self.set_cell(i + 1, j)
                self.set_cell(i + 1, j + 1)

    def draw_random(self, rng: random.Random | None = None) -> None:
        """Bring each interior cell to life with probability one half."""
        rng = rng or random.Random()
        dim = self.image.dim
        for i in range(1, dim - 1):
            for j in range(1, dim - 1):
                if rng.getrandbits(1):
                    self.set_cell(i, j)