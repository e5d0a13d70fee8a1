"""Simple 2D particle emitters and the batching of their quads for drawing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple


@dataclass
class Particle:
    """State of one live particle."""

    position: List[float] = field(default_factory=lambda: [0.0, 0.0])
    dimension: List[float] = field(default_factory=lambda: [0.0, 0.0])
    color: List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0, 0.0])
    velocity: List[float] = field(default_factory=lambda: [0.0, 0.0])
    life_time: float = 0.0


class ParticleVertex(NamedTuple):
    """One corner of a particle quad: position then RGBA colour."""

    x: float
    y: float
    r: float
    g: float
    b: float
    a: float


SpawnFunction = Callable[[], Particle]
UpdateFunction = Callable[[Particle, float], None]


def _trunc_divmod(value: int, divisor: int) -> Tuple[int, int]:
    """Integer quotient and remainder, both truncated toward zero."""
    quotient = abs(value) // abs(divisor)
    if (value < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, value - quotient * divisor


def _quad(particle: Particle) -> List[ParticleVertex]:
    x, y = particle.position[0], particle.position[1]
    w, h = particle.dimension[0], particle.dimension[1]
    r, g, b, a = (particle.color[k] for k in range(4))
    return [
        ParticleVertex(x, y, r, g, b, a),
        ParticleVertex(x + w, y, r, g, b, a),
        ParticleVertex(x + w, y + h, r, g, b, a),
        ParticleVertex(x, y + h, r, g, b, a),
    ]


class Emitter2D:
    """Emits particles at a fixed interval and ages them.

    ``spawn`` creates a new particle; ``update`` is called on every live
    particle each step with the elapsed time. Both are optional.
    """

    def __init__(
        self,
        time_between_emission: int,
        spawn: Optional[SpawnFunction] = None,
        update: Optional[UpdateFunction] = None,
    ) -> None:
        if spawn is not None and int(time_between_emission) == 0:
            raise ValueError("time between emissions must not be zero")
        self._time_between_emission = int(time_between_emission)
        self._time_since_last_emit = 0
        self._spawn = spawn
        self._update = update
        self._active = True
        self._particles: List[Particle] = []
        self._vertices: List[ParticleVertex] = []

    def activate(self) -> None:
        self._active = True

    def deactivate(self) -> None:
        self._active = False

    def is_active(self) -> bool:
        return self._active

    @property
    def particles(self) -> Sequence[Particle]:
        """The live particles."""
        return tuple(self._particles)

    def update(self, dt: float) -> None:
        """Emit due particles, age all of them, drop the dead and rebuild the quads."""
        if self._active and self._spawn is not None:
            self._emit_due(dt)

        vertices: List[ParticleVertex] = []
        index = 0
        while index < len(self._particles):
            particle = self._particles[index]
            particle.life_time -= dt
            if particle.life_time <= 0.0:
                self._kill(index)
                continue
            if self._update is not None:
                self._update(particle, dt)
            vertices.extend(_quad(particle))
            index += 1
        self._vertices = vertices

    def spawn_particles(self, count: int) -> None:
        """Create ``count`` particles at once; does nothing without a spawn function."""
        if self._spawn is None:
            return
        for _ in range(count):
            self._particles.append(self._spawn())

    @property
    def particle_count(self) -> int:
        return len(self._particles)

    def vertices(self) -> List[ParticleVertex]:
        """Four vertices per particle alive at the last update."""
        return list(self._vertices)

    def _emit_due(self, dt: float) -> None:
        self._time_since_last_emit = int(self._time_since_last_emit + dt)
        emissions, self._time_since_last_emit = _trunc_divmod(
            self._time_since_last_emit, self._time_between_emission
        )
        for _ in range(max(emissions, 0)):
            self._particles.append(self._spawn())  # type: ignore[misc]

    def _kill(self, index: int) -> None:
        last = self._particles.pop()
        if index < len(self._particles):
            self._particles[index] = last


def quad_indices(count: int) -> List[int]:
    """Triangle indices for ``count`` quads of four vertices each."""
    indices: List[int] = []
    for quad in range(count):
        base = 4 * quad
        indices.extend((base, base + 1, base + 2, base + 2, base + 3, base))
    return indices


class ParticleBatch:
    """Gathers the quads of several emitters into one vertex and index list."""

    def __init__(self) -> None:
        self._emitters: List[Emitter2D] = []
        self.vertices: List[ParticleVertex] = []
        self.indices: List[int] = []

    def add_emitter(self, emitter: Emitter2D) -> None:
        self._emitters.append(emitter)

    def update(self) -> Tuple[List[ParticleVertex], List[int]]:
        """Collect every emitter's vertices and return ``(vertices, indices)``."""
        vertices: List[ParticleVertex] = []
        for emitter in self._emitters:
            vertices.extend(emitter.vertices())
        self.vertices = vertices
        self.indices = quad_indices(len(vertices) // 4)
        return self.vertices, self.indices