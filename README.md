# rayforge

Building blocks for a Monte Carlo path tracer, written in plain Python with
no third-party dependencies.

## Modules

- `rayforge.utility`: the constants `INFINITY` and `PI`, plus
  `degrees_to_radians`, `random_double(minimum=0.0, maximum=1.0)` (a float in
  `[minimum, maximum)`) and `random_int(minimum, maximum)` (an integer in
  `[minimum, maximum]`).
- `rayforge.vec3`: the immutable `Vec3` type and its subclass `Point3`.
  `Vec3` supports `+`, `-`, negation, component-wise `*` with another vector,
  `*` and `/` by a number, indexing, iteration and equality. It has `length`,
  `length_squared`, `near_zero` (every component below `1e-8` in size),
  `normalized`, `dot`, `cross`, and the constructors `Vec3.splat(value)` and
  `Vec3.random(minimum=0.0, maximum=1.0)`. Adding a vector to a `Point3` or
  subtracting one from it gives a `Point3`; `Point3.unit()` returns the unit
  `Vec3` towards the point. The module-level helpers are `unit_vector`,
  `random_in_unit_disk`, `random_in_unit_sphere`, `random_unit_vector`,
  `random_on_hemisphere`, `random_cosine_direction`, `reflect`, `refract`,
  `is_longer(a, b)` (whether `a` is strictly longer than `b`) and
  `is_parallel(a, b)` (whether the component-wise ratios of `a` to `b` are all
  equal).
- `rayforge.vector_n`: `VectorN`, a mutable vector whose size is fixed when it
  is built, from any iterable or with `VectorN.filled(size, value)`,
  `VectorN.zeros(size)` or `VectorN.random(size, minimum=0.0, maximum=1.0)`.
  Indexing outside the vector raises `IndexError`, dividing by zero raises
  `ZeroDivisionError`, and combining vectors of different sizes raises
  `ValueError`, as does `cross` on anything but three-component vectors.
  Printed, a vector reads like `(1, 2, 3)`.
- `rayforge.ray`: `Ray`, a frozen dataclass with `origin`, `direction` and
  `time` (default `0.0`); `Ray.at(t)` returns `origin + t * direction`.
- `rayforge.ortho`: `OrthonormalFrame` with axes `u`, `v` and `w`.
  `OrthonormalFrame.from_w(w)` builds a right-handed frame whose `w` axis
  points along the given direction; `local(a, b, c)` and `local_vector(vec)`
  map frame coordinates to world space.
- `rayforge.pdf`: the abstract `Pdf` with `value(direction)` and `generate()`,
  and the densities `CosinePdf(normal)`, `HittablePdf(objects, origin)` and
  `MixturePdf(p0, p1)` (an equal-weight mix of two densities). `HittablePdf`
  accepts any object with `pdf_value(origin, direction)` and `random(origin)`
  methods, as described by the `SampledHittable` protocol.
- `rayforge.perlin`: `Perlin`, with `noise(p)` and `turb(p, depth)`, the
  absolute sum of `depth` octaves of noise.
- `rayforge.texture`: the abstract `Texture` with `value(u, v, p)`, and the
  textures `SolidColor` (also `SolidColor.from_rgb`), `CheckerTexture` (also
  `CheckerTexture.from_colors(scale, c1, c2)`) and
  `NoiseTexture(scale=1.0, noise=None)`, a marble-like pattern driven by
  Perlin turbulence.

All randomness comes from Python's `random` module, so `random.seed(...)`
makes results repeatable.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from rayforge.vec3 import Vec3, Point3, reflect
from rayforge.ray import Ray
from rayforge.ortho import OrthonormalFrame
from rayforge.pdf import CosinePdf
from rayforge.texture import CheckerTexture

ray = Ray(Point3(0, 0, 0), Vec3(1, 2, 3))
print(ray.at(2.0))                      # 2 4 6

bounce = reflect(Vec3(1, -1, 0), Vec3(0, 1, 0))   # Vec3(1.0, 1.0, 0.0)

frame = OrthonormalFrame.from_w(Vec3(0, 0, 1))
pdf = CosinePdf(Vec3(0, 0, 1))
direction = pdf.generate()
density = pdf.value(direction)

checker = CheckerTexture.from_colors(0.5, Vec3(1, 1, 1), Vec3(0, 0, 0))
print(checker.value(0.0, 0.0, Point3(0.1, 0.1, 0.1)))   # 1 1 1
```

## What this package does not do

It is a library of parts, not a renderer. It has no camera, no scene objects
such as spheres, quads or triangles, no materials, no scene-file reader, no
image output or display window, and no command to run. Code that uses
`HittablePdf` must supply its own objects to sample.