"""Square RGBA image pair with tiling information."""

from __future__ import annotations

from typing import Iterator

_MASK32 = 0xFFFFFFFF


class KernelError(Exception):
    """Raised when a kernel meets a configuration it cannot work with."""


def rgba(r: int, g: int, b: int, a: int) -> int:
    """Pack four 8-bit components into a 32-bit RGBA colour."""
    return ((r << 24) | (g << 16) | (b << 8) | a) & _MASK32


def extract_red(c: int) -> int:
    return (c >> 24) & 255


def extract_green(c: int) -> int:
    return (c >> 16) & 255


def extract_blue(c: int) -> int:
    return (c >> 8) & 255


def extract_alpha(c: int) -> int:
    return c & 255


class Image:
    """A DIM x DIM current image and its alternate buffer.

    Pixels are addressed as ``image[y, x]`` on the current buffer, and via
    :meth:`get_next` / :meth:`set_next` on the alternate one.
    """

    def __init__(self, dim: int, tile_size: int | None = None, grain: int | None = None):
        if dim <= 0:
            raise KernelError(f"DIM must be positive (got {dim})")
        if tile_size is None and grain is None:
            tile_size, grain = dim, 1
        elif tile_size is None:
            if grain <= 0 or dim % grain:
                raise KernelError(f"GRAIN ({grain}) must divide DIM ({dim})")
            tile_size = dim // grain
        elif grain is None:
            if tile_size <= 0 or dim % tile_size:
                raise KernelError(f"TILE_SIZE ({tile_size}) must divide DIM ({dim})")
            grain = dim // tile_size
        elif tile_size <= 0 or grain <= 0 or tile_size * grain != dim:
            raise KernelError(
                f"TILE_SIZE ({tile_size}) x GRAIN ({grain}) does not match DIM ({dim})"
            )
        self.dim = dim
        self.tile_size = tile_size
        self.grain = grain
        self._cur = [0] * (dim * dim)
        self._alt = [0] * (dim * dim)

    def _offset(self, y: int, x: int) -> int:
        if not (0 <= y < self.dim and 0 <= x < self.dim):
            raise IndexError(f"pixel ({y}, {x}) outside a {self.dim}x{self.dim} image")
        return y * self.dim + x

    def __getitem__(self, key: tuple[int, int]) -> int:
        y, x = key
        return self._cur[self._offset(y, x)]

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        y, x = key
        self._cur[self._offset(y, x)] = value & _MASK32

    def get_next(self, y: int, x: int) -> int:
        return self._alt[self._offset(y, x)]

    def set_next(self, y: int, x: int, value: int) -> None:
        self._alt[self._offset(y, x)] = value & _MASK32

    def swap(self) -> None:
        """Exchange the current and alternate buffers."""
        self._cur, self._alt = self._alt, self._cur

    def replicate(self) -> None:
        """Copy the current buffer into the alternate one."""
        self._alt = list(self._cur)

    def tiles(self) -> Iterator[tuple[int, int, int, int]]:
        """Yield ``(x, y, width, height)`` for every tile, row by row."""
        ts = self.tile_size
        for y in range(0, self.dim, ts):
            for x in range(0, self.dim, ts):
                yield x, y, ts, ts