# animray

Pure-Python building blocks for a ray tracer. The package has no
dependencies beyond the standard library.

## What is in the package

- `animray.point3d`: `Point3D`, a point or vector in homogeneous
  coordinates (`x()`, `y()`, `z()`, `dot()`, `magnitude()`, `unit()`,
  arithmetic with `+`, `-`, `*`, `/` and unary `-`), and `UnitVector` for
  directions (`from_point()`, `to_point()`, scaling by a number, which gives
  a `Point3D`).
- `animray.line`: `Line`, a dataclass with `start` and `end` points, plus
  `length_squared()` and `proportion_along()`.
- `animray.products`: `cross()` and `dot()` for any mix of `Point3D` and
  `UnitVector`.
- `animray.array_based`: `ArrayBased`, a fixed-size sequence of numbers with
  bounds-checked `at()` and `set()` (they raise `IndexError`), component-wise
  `*=`, `+=` and `/=`, plus `array_sum()` and `make_array()`.
- `animray.angles`: `degrees()` converts an angle in degrees to radians.
  `PI` is the constant it uses.
- `animray.primes`: `is_prime()`, `prime_generator()`, which yields the
  primes in order, and `prime_factors()`.
- `animray.quadratic`: `quadratic_has_solution()` and
  `first_positive_quadratic_solution()`, which returns `None` when there is
  no root at or beyond the limit.
- `animray.interpolation`: `linear(start, end, time, outof)` and
  `proportion(end, time, outof)`. Integer arguments give integer results,
  truncated toward zero.
- `animray.narrow`: `narrow(value, target, source=None)` converts an integer
  into one of the `IntegerType` members (`BOOL`, `INT8` … `UINT64`). It
  raises `UnderflowError` or `OverflowError` when the value does not fit.
- `animray.mandelbrot`: `Transformer`, a per-pixel function giving a
  Mandelbrot escape-time colour, and `default_colour()`, which scales the
  count to 0–255.
- `animray.targa`: `encode_targa()` returns the bytes of an uncompressed
  Targa image, and `save_targa()` writes them to a file. Rows are given top
  row first. Each pixel is either a 0–255 grey level or a
  `(red, green, blue)` triple.
- `animray.camera`: `FlatCamera` maps pixels to points on the image plane,
  and `FlatJitterCamera` adds a random offset within the pixel.
  `PinholeCamera` and `OrthoCamera` build rays. By default a ray is a `Line`,
  and any factory taking two `Point3D` ends can be passed instead.
  `StacattoMovie` and `Movie` wrap a camera and tag each ray with its frame
  in a `FrameRay`. `Movie` spreads the frame time over the shutter for
  motion blur.
- `animray.panel`: `Panel`, a rectangular piece of a larger image that is
  computed at an offset and indexed by column, then by row.
- `animray.texture_policy`: `ConstValue`, `Coercer`, `identity()`,
  `apply()`, `apply_without_arguments()` and `location_mapper_binary_op()`.
  `texture_policy()` picks a `TexturePolicy` to suit a functor.
- `animray.surface`: `Surface` combines a geometry object with surface
  layers. `SurfaceIntersection` pairs a hit with those layers.
  `surface_interaction()` and `surface_emission()` add up what each layer
  contributes.

## What the package does not do

It holds no geometry, lights, shaders, scenes or film type of its own, and
it has no command-line renderer. A `Surface` works with any geometry object
that provides `intersects(ray, epsilon)` and `occludes(ray, epsilon)`, and
with any layers that are callables. You supply these yourself.

## Installation

```
pip install .
```

## Examples

Points and vectors:

```python
from animray.point3d import Point3D
from animray.products import cross, dot

a = Point3D(1, 0, 0)
b = Point3D(0, 1, 0)
print(cross(a, b))        # (0, 0, 1, 1)
print(dot(a, b))          # 0
print((a + b).magnitude())
```

Interpolation:

```python
from animray.interpolation import linear

linear(10, 20, 1, 2)      # 15
```

A pinhole camera:

```python
from animray.camera import PinholeCamera

camera = PinholeCamera(0.036, 0.024, 600, 400, 0.05)
ray = camera(300, 200)    # a Line from the pinhole through that pixel
```

Rendering a Mandelbrot image to a Targa file:

```python
from animray.mandelbrot import Transformer
from animray.targa import save_targa

width, height = 120, 80
mandel = Transformer(width, height, -0.5, 0.0, 3.0, 8)
rows = [[mandel(x, y) for x in range(width)] for y in range(height)]
save_targa("mandelbrot.tga", rows)
```

## Running the tests

```
pip install .[test]
pytest
```