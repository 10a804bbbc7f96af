# easypap

A collection of image-based computation kernels for learning how a
computation is split into tiles and iterated until it becomes stable, together
with the bookkeeping used to monitor such runs: per-core activity statistics
and an execution trace model.

Everything is plain Python with no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Images and colours

`easypap.image.Image` is a square grid of `dim × dim` pixels, each a 32-bit
RGBA colour, together with an alternate buffer of the same size. The image is
split into tiles of `tile_size × tile_size` pixels, `grain` tiles on a side.
Give either `tile_size` or `grain` (the other is derived), both (they must
multiply to `dim`), or neither (one tile covering the whole image).

```python
from easypap.image import Image, rgba, extract_red

img = Image(dim=64, tile_size=16, grain=4)
img[10, 20] = rgba(255, 255, 0, 255)   # row 10, column 20
assert extract_red(img[10, 20]) == 255

for x, y, w, h in img.tiles():         # every tile, row by row
    ...
```

- `img[y, x]` reads and writes the current buffer; `get_next(y, x)` and
  `set_next(y, x, value)` work on the alternate one. Values are kept to 32
  bits, and coordinates outside the image raise `IndexError`.
- `swap()` exchanges the two buffers; `replicate()` copies the current buffer
  into the alternate one.
- `rgba(r, g, b, a)` packs a colour; `extract_red`, `extract_green`,
  `extract_blue` and `extract_alpha` unpack it.

Problems the kernels detect — a tiling that does not match the image size, a
bad drawing parameter, an image too small or too large — are raised as
`easypap.image.KernelError`.

## Kernels

Every kernel lives in `easypap.kernels` and is built on the `Image` it works
on. A `compute_*` method runs up to `nb_iter` iterations and returns `0`, or
the iteration at which the computation stopped changing.

| Module | Class | Methods | What it does |
| --- | --- | --- | --- |
| `blur` | `BlurKernel` | `compute_seq`, `compute_tiled` | mean of each pixel's 3×3 neighbourhood |
| `invert` | `InvertKernel` | `compute_seq`, `compute_tiled` | inverts red, green and blue, keeps alpha |
| `mandel` | `MandelKernel` | `compute_seq`, `compute_tiled`, `zoom` | Mandelbrot set, zooming in after each iteration |
| `max` | `MaxKernel` | `compute_seq`, `compute_tiled`, `tile_down_right`, `tile_up_left`, `draw`, `recolor`, `spiral` | spreads the largest colour through regions of non-zero pixels |
| `pixelize` | `PixelizeKernel` | `compute_seq`, `draw` | replaces square blocks by their mean colour |
| `transpose` | `TransposeKernel` | `compute_seq`, `compute_tiled` | transposes the image |
| `sable` | `SableKernel` | see below | abelian sandpile |
| `life` | `LifeKernel` | `compute_seq`, `compute_tiled`, `set_cell`, `get_cell`, `draw_stable`, `draw_random`, `refresh_img` | Conway's Game of Life |
| `simple` | `NoneKernel`, `SampleKernel`, `Rotation90Kernel` | `compute_seq` | does nothing; fills with yellow; rotates a quarter turn |
| `scrollup` | `ScrollupKernel` | `compute_seq`, `compute_tiled` | moves every row up by one, the top row wrapping to the bottom |
| `spin` | `SpinKernel` | `compute_seq`, `compute_line`, `compute_tiled`, `compute_color`, `rotate` | two-colour pinwheel turning one degree per iteration |
| `stripes` | `StripesKernel` | `compute_seq`, `draw` | brightens columns with the mask bit set, darkens the others |

Of these, only `MaxKernel`, `SableKernel` and `LifeKernel` ever report
stability; `NoneKernel.compute_seq` always returns `1`, and the others return
`0`.

Drawing parameters are strings, read like a leading integer:

- `MaxKernel.draw(param)` draws `param` spiral twists when it is positive,
  then `recolor()` gives each non-transparent interior pixel its own colour
  (images up to 4096 pixels on a side).
- `PixelizeKernel.draw(param)` sets the block size, which must be a power of
  two (16 by default).
- `StripesKernel.draw(param)` sets the stripe width to `2 ** param`, with
  `param` from 0 to 12.

A few helpers are public as well: `mandel.iteration_to_color`,
`pixelize.log2_of_power_of_2`, `scrollup.circle_mask`, `spin.atan_approx`,
`spin.atan2_approx`, and `stripes.scale_color`, `brighten` and `darken`.

### Sandpile

`SableKernel` keeps a table of grain counts; a cell holding four grains or
more gives a quarter of them to each neighbour. Border cells collect grains
but never topple. Initial configurations are `draw_4partout()` (four grains
everywhere), `draw_dim()` (large piles on a grid) and `draw_alea(rng)`
(random piles), also reachable through `draw("4partout" | "DIM" | "alea")`,
which falls back to `4partout`. The variants `compute_seq`,
`compute_seq_opt` (skips tiles known to be stable), `compute_omp` (rows in
three interleaved passes), `compute_tiled`, `compute_tileddb` and
`compute_tiledsharedy` (checkerboard orders of tiles) all run the same
automaton. `refresh_img()` paints the table into the image.

```python
from easypap.image import Image
from easypap.kernels.sable import SableKernel

img = Image(dim=64, tile_size=16)
sand = SableKernel(img)
sand.draw("4partout")
stable_at = sand.compute_tiled(10_000)   # 0 if not yet stable
sand.refresh_img()
```

### Game of Life

```python
from easypap.image import Image
from easypap.kernels.life import LifeKernel

life = LifeKernel(Image(dim=64, tile_size=16))
life.draw_stable()
assert life.compute_seq(10) == 1      # 2×2 blocks never change
life.refresh_img()                    # living cells in yellow
```

## Monitoring and traces

- `easypap.cpustat.CpuStats(nb_cores)` accumulates per-core working and idle
  time (`reset`, `start_work`, `finish_work`, `start_idle`, `freeze`) and
  reports `activity_ratio(who)` and `idle_total()`. `IdlenessHistogram` keeps
  the pixels of a scrolling idleness bar chart (`push`, `pixel`), and
  `window_size(nb_cores)` gives the width, height and initial height of an
  activity window for that many cores.
- `easypap.traces` holds the trace model: `TraceEvent` event codes,
  `TraceTask`, `TraceIteration` and `Trace`, whose `tasks(cpu)` lists the
  tasks of one core and whose `*_start_time` / `*_end_time` methods give
  times raw or aligned by each iteration's correction and gap.
- `easypap.debug.DebugFlags(flags)` tells whether a debug flag is enabled: it
  is when the flag string contains it, or contains `+`.

## What this package does not do

It has no command-line program and no graphical window: kernels run only
when called from Python, and `CpuStats` and `IdlenessHistogram` compute what
would be shown without drawing it. It does not load or save image files,
does not read or write trace files (the `Trace` model is filled in by the
caller), and does not read pattern files for the Game of Life. Every kernel
runs sequentially in a single process; there are no GPU or multi-process
variants.