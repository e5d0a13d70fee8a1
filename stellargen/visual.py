"""Screen-space description of a system's star for rendering."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, NamedTuple, Tuple

import numpy as np

from stellargen.transform import graph_rotate2, graph_translate2

MIN_VISUAL_RADIUS = 30.0
MAX_VISUAL_RADIUS = 400.0
RADIUS_TRANSITION = 0.15

QUAD_INDICES = (0, 1, 2, 2, 3, 0)


@dataclass
class StellarVisual:
    """A star drawn as a rotating disc."""

    stellar: Any
    position: Tuple[float, float]
    rotation: float
    radius_visual: float
    color: Tuple[float, float, float]
    angular_velocity: float = 0.0

    def update(self, dt: float) -> None:
        """Advance the rotation by ``dt`` times the angular velocity."""
        self.rotation += dt * self.angular_velocity

    def model(self) -> np.ndarray:
        """3x3 model matrix: translation then rotation."""
        return graph_translate2(self.position) @ graph_rotate2(self.rotation)


class StellarVertex(NamedTuple):
    position: Tuple[float, float]
    uv: Tuple[float, float]


def compute_visual_stellar_radius(
    stellar_radius: float,
    min_radius: float = MIN_VISUAL_RADIUS,
    max_radius: float = MAX_VISUAL_RADIUS,
    transition: float = RADIUS_TRANSITION,
) -> float:
    """Map a physical radius to a drawing radius, softly bounded.

    Raises ValueError for a negative radius.
    """
    visual = math.pow(stellar_radius, 0.4)
    clamped = min(max(visual, min_radius), max_radius)
    delta = abs(visual - clamped)
    if delta < 0.0001:
        return visual
    return clamped + (visual - clamped) * math.exp(-delta / transition)


def build_stellar_visual(stellar: Any) -> StellarVisual:
    """Visual of a star at the origin, yellow and not rotating."""
    return StellarVisual(
        stellar=stellar,
        position=(0.0, 0.0),
        rotation=0.0,
        radius_visual=compute_visual_stellar_radius(stellar.radius),
        color=(1.0, 1.0, 0.0),
        angular_velocity=0.0,
    )


def stellar_quad(visual: StellarVisual) -> Tuple[List[StellarVertex], List[int]]:
    """Vertices and triangle indices of the square the star is drawn in."""
    half = 0.5 * visual.radius_visual
    vertices = [
        StellarVertex((-half, -half), (-1.0, -1.0)),
        StellarVertex((half, -half), (1.0, -1.0)),
        StellarVertex((half, half), (1.0, 1.0)),
        StellarVertex((-half, half), (-1.0, 1.0)),
    ]
    return vertices, list(QUAD_INDICES)