"""Abelian sandpile: cells holding four grains or more topple onto their neighbours."""

from __future__ import annotations

import random
from typing import Callable, Iterable

from easypap.image import Image, KernelError


def _rgb(r: int, g: int, b: int) -> int:
    return (r << 24) | (g << 16) | (b << 8) | 255


# Colours of piles holding one to four grains.
_SMALL_PILES = {1: (0, 255, 0), 2: (0, 0, 255), 3: (255, 0, 0), 4: (255, 255, 255)}


class SableKernel:
    """Sandpile on a DIM x DIM table whose border cells only collect grains."""

    def __init__(self, image: Image):
        self.image = image
        dim = image.dim
        grain = image.grain
        self.table = [[0] * dim for _ in range(dim)]
        self.unstable = [[True] * grain for _ in range(grain)]
        self.max_grains = 0

    def _interior(self) -> Iterable[tuple[int, int]]:
        dim = self.image.dim
        return ((i, j) for i in range(1, dim - 1) for j in range(1, dim - 1))

    # ------------------------------------------------------------ rendering

    def refresh_img(self) -> None:
        """Paint the current table into the image and remember the largest pile."""
        img = self.image
        scale = self.max_grains or 1
        highest = 0
        for i, j in self._interior():
            g = self.table[i][j]
            if g > 4:
                r = b = int(255 - (240 * float(g)) / float(scale))
                color = (r, 0, b)
            else:
                color = _SMALL_PILES.get(g, (0, 0, 0))
            img[i, j] = _rgb(*color)
            highest = max(highest, g)
        self.max_grains = highest

    # ------------------------------------------------------ initial configs

    def draw(self, param: str | None) -> None:
        """Run the drawing named by ``param``, falling back to ``4partout``."""
        drawings: dict[str, Callable[[], None]] = {
            "4partout": self.draw_4partout,
            "DIM": self.draw_dim,
            "alea": lambda: self.draw_alea(None),
        }
        drawings.get(param or "", self.draw_4partout)()

    def draw_4partout(self) -> None:
        """Put four grains on every interior cell."""
        self.max_grains = 8
        for i, j in self._interior():
            self.table[i][j] = 4

    def draw_dim(self) -> None:
        """Drop large piles on a regular grid of quarter positions."""
        dim = self.image.dim
        step = dim // 4
        if step == 0:
            raise KernelError(f"DIM should be at least 4 (got {dim})")
        self.max_grains = dim
        for i in range(step, dim - 1, step):
            for j in range(step, dim - 1, step):
                self.table[i][j] = i * j // 4

    def draw_alea(self, rng: random.Random | None = None) -> None:
        """Drop DIM/8 random piles of 1000 to 4999 grains on interior cells."""
        rng = rng or random.Random()
        dim = self.image.dim
        if dim < 3:
            raise KernelError(f"DIM should be at least 3 (got {dim})")
        self.max_grains = 5000
        for _ in range(dim >> 3):
            i = 1 + rng.randrange(dim - 2)
            j = 1 + rng.randrange(dim - 2)
            self.table[i][j] = 1000 + rng.randrange(4000)

    # ----------------------------------------------------------- computing

    def _topple(self, y: int, x: int) -> bool:
        t = self.table
        row = t[y]
        v = row[x]
        if v < 4:
            return False
        div4 = v // 4
        row[x - 1] += div4
        row[x + 1] += div4
        t[y - 1][x] += div4
        t[y + 1][x] += div4
        row[x] = v % 4
        return True

    def _do_tile(self, x: int, y: int, width: int, height: int) -> bool:
        return any([self._topple(i, j) for i in range(y, y + height) for j in range(x, x + width)])

    def _inner_tile(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Tile at (x, y) shrunk so that it never covers the border cells."""
        dim = self.image.dim
        ts = self.image.tile_size
        return (
            x + (x == 0),
            y + (y == 0),
            ts - ((x + ts == dim) + (x == 0)),
            ts - ((y + ts == dim) + (y == 0)),
        )

    def _do_inner_tiles(self, coords: Iterable[tuple[int, int]]) -> bool:
        return any([self._do_tile(*self._inner_tile(x, y)) for x, y in coords])

    @staticmethod
    def _until_stable(nb_iter: int, sweep: Callable[[], bool]) -> int:
        """Run ``sweep`` until it changes nothing; return that iteration, or 0."""
        for it in range(1, nb_iter + 1):
            if not sweep():
                return it
        return 0

    def _checkerboard(self, passes: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
        dim = self.image.dim
        ts = self.image.tile_size
        return [
            (x, y)
            for y0, x0 in passes
            for y in range(y0, dim, 2 * ts)
            for x in range(x0, dim, 2 * ts)
        ]

    def compute_seq(self, nb_iter: int) -> int:
        dim = self.image.dim
        return self._until_stable(nb_iter, lambda: self._do_tile(1, 1, dim - 2, dim - 2))

    def compute_seq_opt(self, nb_iter: int) -> int:
        """Tiled sweep that skips tiles known to be stable."""
        dim = self.image.dim
        ts = self.image.tile_size
        grain = self.image.grain
        unstable = self.unstable

        def sweep() -> bool:
            change = False
            for y in range(0, dim, ts):
                for x in range(0, dim, ts):
                    tx, ty = x // ts, y // ts
                    if not unstable[ty][tx]:
                        continue
                    if self._do_tile(*self._inner_tile(x, y)):
                        change = True
                        if tx > 0:
                            unstable[ty][tx - 1] = True
                        if ty > 0:
                            unstable[ty - 1][tx] = True
                        if tx < grain - 1:
                            unstable[ty][tx + 1] = True
                        if tx < grain - 1 and ty < grain - 1:
                            unstable[ty + 1][tx] = True
                    else:
                        unstable[ty][tx] = False
            return change

        return self._until_stable(nb_iter, sweep)

    def compute_omp(self, nb_iter: int) -> int:
        """Sweep interior rows in three interleaved passes (rows 1, 2, 3 modulo 3)."""
        dim = self.image.dim
        cells = [
            (y, x)
            for start in (1, 2, 3)
            for y in range(start, dim - 1, 3)
            for x in range(1, dim - 1)
        ]
        return self._until_stable(nb_iter, lambda: any([self._topple(y, x) for y, x in cells]))

    def compute_tiled(self, nb_iter: int) -> int:
        dim = self.image.dim
        ts = self.image.tile_size
        coords = [(x, y) for y in range(0, dim, ts) for x in range(0, dim, ts)]
        return self._until_stable(nb_iter, lambda: self._do_inner_tiles(coords))

    def compute_tileddb(self, nb_iter: int) -> int:
        """Checkerboard sweep in four passes of non-adjacent tiles."""
        ts = self.image.tile_size
        coords = self._checkerboard(((0, 0), (ts, 0), (0, ts), (ts, ts)))
        return self._until_stable(nb_iter, lambda: self._do_inner_tiles(coords))

    def compute_tiledsharedy(self, nb_iter: int) -> int:
        """Checkerboard sweep in two passes, black tiles then white ones."""
        dim = self.image.dim
        ts = self.image.tile_size
        coords = []
        for first in (True, False):
            for y in range(0, dim, ts):
                x0 = 0 if (y % (2 * ts) == 0) == first else ts
                coords.extend((x, y) for x in range(x0, dim, 2 * ts))
        return self._until_stable(nb_iter, lambda: self._do_inner_tiles(coords))