"""Particle systems with force generators, springs, buoyancy and fireworks."""

__version__ = "0.1.0"
__all__ = [
    "camera",
    "colors",
    "fireworks",
    "forces",
    "generators",
    "particle",
    "registry",
    "rocket",
    "systems",
    "vector",
]