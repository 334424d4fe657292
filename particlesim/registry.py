"""Pairs of force generators and the particles they act on."""

from __future__ import annotations

from typing import Iterator

from .forces import ForceGenerator
from .particle import Particle


class ForceRegistry:
    """An ordered collection of (generator, particle) registrations."""

    def __init__(self) -> None:
        self._entries: list[tuple[ForceGenerator, Particle]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[ForceGenerator, Particle]]:
        return iter(list(self._entries))

    def __contains__(self, entry: object) -> bool:
        if not isinstance(entry, tuple) or len(entry) != 2:
            return False
        generator, particle = entry
        return any(g is generator and p is particle for g, p in self._entries)

    def add(self, generator: ForceGenerator, particle: Particle) -> None:
        """Register ``generator`` to act on ``particle``; duplicates are kept."""
        self._entries.append((generator, particle))

    def update_forces(self, duration: float) -> None:
        """Let every registered generator act on its particle."""
        for generator, particle in self._entries:
            generator.update_force(particle, duration)

    def remove_particle(self, particle: Particle) -> None:
        """Drop every registration of ``particle``."""
        self._entries = [(g, p) for g, p in self._entries if p is not particle]

    def remove_generator(self, generator: ForceGenerator) -> None:
        """Drop every registration of ``generator``."""
        self._entries = [(g, p) for g, p in self._entries if g is not generator]

    def clear(self) -> None:
        self._entries.clear()