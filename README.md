# stellargen

Building blocks for deterministic, seed-driven generation of space content
in games and simulations: a small 32-bit random generator, weighted choices,
moon catalogs loaded from CSV, tags, quaternions and transformation
matrices, a 2D particle emitter, and the screen-space description of a star.
The same seed always gives the same draws.

## Modules

- `stellargen.lehmer` — `Lehmer32`, a seedable 32-bit generator with
  `next_uint32`, `next_float32`, `uniform_uint32`, `uniform_int32`,
  `uniform_float`, `gaussian` and `poisson`.
- `stellargen.weighted` — `WeightedEntry` and `pick_weighted`.
- `stellargen.logger` — `LogLevel`, `Logger`, `format_message`,
  `configure` and `get_logger`.
- `stellargen.tags` — `TagCategory`, `Tag`, `TagManager`, `has_tag` and
  `tag_category_from_string`.
- `stellargen.catalog` — `load_categories`, `load_subtypes`, `SubtypeData`
  and `CatalogError`.
- `stellargen.moon` — `MoonCategory`, `MoonObject`, `MoonObjectFactory` and
  `moon_category_from_string`.
- `stellargen.quaternion` — an immutable `Quaternion`.
- `stellargen.transform` — 2D and 3D rotation, scale, translation and
  projection matrices as numpy arrays.
- `stellargen.particles` — `Particle`, `ParticleVertex`, `Emitter2D`,
  `ParticleBatch` and `quad_indices`.
- `stellargen.visual` — `StellarVisual`, `StellarVertex`,
  `compute_visual_stellar_radius`, `build_stellar_visual` and
  `stellar_quad`.

## Random numbers

```python
from stellargen.lehmer import Lehmer32

rng = Lehmer32(42)
rng.next_uint32()            # an integer in [0, 2**32)
rng.uniform_float(1.5, 2.0)  # single-precision float between the bounds
rng.poisson(3.0)             # a non-negative count
```

A seed of `0` is replaced by a fixed non-zero seed. `set_seed` restarts the
sequence and the `seed` property gives the seed it started from. Bounds of the
`uniform_*` methods may be given in either order. `poisson` returns `0` for a
non-positive rate and uses a normal approximation above 30.

## Weighted choices

```python
from stellargen.lehmer import Lehmer32
from stellargen.weighted import WeightedEntry, pick_weighted

rng = Lehmer32(7)
entries = [WeightedEntry("Empty", 1.0), WeightedEntry("Planet", 3.0)]
pick_weighted(entries, rng)
```

Each entry is picked with probability proportional to its weight. An empty
list raises `ValueError`.

## Logging

`Logger(log_file_path, state)` writes each message whose level bit is set in
`state` to the console (with colours, when `LogLevel.DISP_CMD` is set) and to
the log file (when `LogLevel.DISP_TXT` is set). The default state `0xFF`
enables every level and both outputs. If the file cannot be opened, file
output is turned off and an error is logged. A `Logger` is a context manager;
`close()` logs the shutdown and closes the file.

`configure(state, path)` sets how the shared logger is created, and
`get_logger()` returns it, creating it on first use (by default writing to
`UNKNOWN.log` in the current directory). Every class that takes a `logger`
argument uses the shared logger when none is given.

## Moon catalogs

A moon factory reads two CSV files.

The category file has a header line, then one `Category,Weight` row per
category. Rows with an unknown category or an unreadable weight are logged
and skipped.

The subtype file has a header whose first three columns are `Subtype`,
`Category` and `Weight`, followed by named numeric columns. The columns
`MinMassEarth`, `MaxMassEarth`, `MinRadiusKm`, `MaxRadiusKm`,
`MinTemperatureK` and `MaxTemperatureK` give the ranges that mass, radius and
temperature are drawn from. A wrong header, an unknown category in a subtype
row, a missing file, or a subtype lacking one of the header's columns raises
`CatalogError`; rows with an unreadable number are logged and skipped.

Category names are `Rock`, `Ice`, `Volcanic`, `Oceanic`, `Captured`,
`Artificial` and `Exotic`.

```python
from stellargen.lehmer import Lehmer32
from stellargen.moon import MoonObjectFactory

factory = MoonObjectFactory("res/data/moon_category.csv", "res/data/moon_subtype.csv")
moon = factory.generate(Lehmer32(1234))
print(moon.info_str(0))
print(factory.info_category_str())
print(factory.info_subtype_str())
```

`generate` picks a category, then a subtype of that category, then draws the
physical properties uniformly from the subtype's ranges.

## Tags

```python
from stellargen.tags import TagCategory, TagManager, has_tag

tags = TagManager()
tags.create("Volcano", TagCategory.GEOLOGICAL)
volcano = tags.get("Volcano")
has_tag([volcano], volcano.id)  # True
```

Tags get sequential ids; creating an existing name logs a warning and returns
`False`, and `get` raises `KeyError` for an unknown name. `load_tag_csv(path)`
reads `name,category` rows after a header line; rows with an unknown
category are logged and skipped.

## Quaternions and transforms

```python
import math
from stellargen.quaternion import Quaternion
from stellargen.transform import graph_rotate2, graph_translate2, rotate3

model = graph_translate2([10.0, 5.0]) @ graph_rotate2(math.pi / 4)
rotation = rotate3(Quaternion(1.0, 0.0, 0.0, 0.0).normalized())
```

`Quaternion` supports `+`, `-` and `*` with quaternions and real numbers and
`/` by a real number; adding or subtracting a real number changes only the
real part. Rotations in 2D accept an angle or a complex number. The `graph_`
functions return homogeneous matrices one size larger; `perspective` builds
a 4x4 projection.

## Particles

```python
from stellargen.particles import Emitter2D, Particle, ParticleBatch

def spawn():
    return Particle(position=[0.0, 0.0], dimension=[2.0, 2.0],
                    color=[1.0, 0.5, 0.0, 1.0], life_time=500.0)

emitter = Emitter2D(100, spawn)
emitter.update(250)          # emits two particles, ages them
batch = ParticleBatch()
batch.add_emitter(emitter)
vertices, indices = batch.update()
```

Each live particle yields a quad of four `ParticleVertex` values and six
triangle indices. Particles whose life time runs out are removed.

## Star visuals

`build_stellar_visual(star)` takes any object with a `radius` attribute and
returns a yellow, non-rotating `StellarVisual` at the origin whose drawing
radius is `radius ** 0.4`, softly bounded between 30 and 400.
`stellar_quad(visual)` returns the four vertices and six indices of the
square the star is drawn in, and `model()` its 3x3 model matrix.

## What this package does not do

It generates moons, but has no planet or star factory and no generator that
assembles whole systems with orbital slots. It produces vertex, index and
matrix data for drawing but does not open windows or render anything. It
has no command-line program.

## Running the tests

Install the `test` extra and run `pytest` from the project root.