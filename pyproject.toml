[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rayforge"
version = "0.1.0"
description = "Vector math, rays, sampling densities, Perlin noise and textures for path tracing"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "path tracing", "vector", "perlin noise", "texture", "rendering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rayforge"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
