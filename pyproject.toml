[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "animray"
version = "0.1.0"
description = "Building blocks for a ray tracer: homogeneous points, cameras, surfaces, interpolation and Targa output"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "rendering", "graphics", "targa", "camera", "mandelbrot"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["animray"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
