"""Vector math, rays, orthonormal frames, sampling densities, Perlin noise and textures."""

__version__ = "0.1.0"