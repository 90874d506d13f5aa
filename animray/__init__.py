"""Building blocks for a ray tracer: points, cameras, surfaces, interpolation and Targa output."""

__version__ = "0.1.0"