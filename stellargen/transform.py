"""Rotation, scaling, translation and projection matrices.

Each matrix holds its entries in the order they are listed, row by row.
The ``graph_`` functions give the homogeneous (one size larger) forms used
for rendering.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from stellargen.quaternion import Quaternion

Angle = Union[float, complex]
QuaternionLike = Union[Quaternion, Sequence[float]]


def _cos_sin(angle: Angle) -> Tuple[float, float]:
    """Cosine and sine of an angle, or of the argument of a complex number."""
    if isinstance(angle, complex):
        modulus = abs(angle)
        if modulus == 0:
            raise ZeroDivisionError("a zero complex number gives no rotation")
        return angle.real / modulus, angle.imag / modulus
    return math.cos(angle), math.sin(angle)


def _matrix(size: int, *entries: float) -> np.ndarray:
    return np.array(entries, dtype=float).reshape(size, size)


def _quaternion_parts(q: QuaternionLike) -> Tuple[float, float, float, float]:
    parts = tuple(float(x) for x in q)
    if len(parts) != 4:
        raise ValueError("a quaternion needs exactly four components")
    return parts  # type: ignore[return-value]


def rotate2(angle: Angle) -> np.ndarray:
    """2x2 rotation; ``angle`` may be a number or a complex number."""
    c, s = _cos_sin(angle)
    return _matrix(2, c, s, -s, c)


def rotate_x(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return _matrix(3, 1, 0, 0, 0, c, s, 0, -s, c)


def rotate_y(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return _matrix(3, c, 0, -s, 0, 1, 0, s, 0, c)


def rotate_z(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return _matrix(3, c, s, 0, -s, c, 0, 0, 0, 1)


def _quaternion_rotation(q: QuaternionLike) -> np.ndarray:
    q0, q1, q2, q3 = _quaternion_parts(q)
    return _matrix(
        3,
        2 * (q0 * q0 + q1 * q1) - 1, 2 * (q1 * q2 + q0 * q3), 2 * (q1 * q3 - q0 * q2),
        2 * (q1 * q2 - q0 * q3), 2 * (q0 * q0 + q2 * q2) - 1, 2 * (q2 * q3 + q0 * q1),
        2 * (q1 * q3 + q0 * q2), 2 * (q2 * q3 - q0 * q1), 2 * (q0 * q0 + q3 * q3) - 1,
    )


def rotate3(q: QuaternionLike) -> np.ndarray:
    """3x3 rotation from a unit quaternion ``(r, i, j, k)``."""
    return _quaternion_rotation(q)


def _homogeneous(m: np.ndarray) -> np.ndarray:
    size = m.shape[0] + 1
    out = np.eye(size)
    out[: size - 1, : size - 1] = m
    return out


def graph_translate2(v: Sequence[float]) -> np.ndarray:
    """3x3 translation by ``(v[0], v[1])`` in the last column."""
    return _matrix(3, 1, 0, v[0], 0, 1, v[1], 0, 0, 1)


def graph_rotate2(angle: Angle) -> np.ndarray:
    """3x3 homogeneous 2D rotation; ``angle`` may be a number or a complex number."""
    return _homogeneous(rotate2(angle))


def graph_scale2(sx: float, sy: Optional[float] = None) -> np.ndarray:
    """3x3 scale; uniform when ``sy`` is omitted."""
    if sy is None:
        sy = sx
    return _matrix(3, sx, 0, 0, 0, sy, 0, 0, 0, 1)


def graph_orthographic2(left: float, right: float, bottom: float, top: float) -> np.ndarray:
    """3x3 orthographic projection of the given rectangle onto ``[-1, 1]²``."""
    return _matrix(
        3,
        2 / (right - left), 0, 0,
        0, 2 / (top - bottom), 0,
        -(right + left) / (right - left), -(top + bottom) / (top - bottom), 1,
    )


def graph_translate3(v: Sequence[float]) -> np.ndarray:
    """4x4 translation by ``(v[0], v[1], v[2])`` in the last row."""
    return _matrix(
        4,
        1, 0, 0, 0,
        0, 1, 0, 0,
        0, 0, 1, 0,
        v[0], v[1], v[2], 1,
    )


def graph_rotate_x(angle: float) -> np.ndarray:
    return _homogeneous(rotate_x(angle))


def graph_rotate_y(angle: float) -> np.ndarray:
    return _homogeneous(rotate_y(angle))


def graph_rotate_z(angle: float) -> np.ndarray:
    return _homogeneous(rotate_z(angle))


def graph_rotate3(q: QuaternionLike) -> np.ndarray:
    """4x4 homogeneous rotation from a unit quaternion."""
    return _homogeneous(_quaternion_rotation(q))


def graph_scale3(sx: float, sy: Optional[float] = None, sz: Optional[float] = None) -> np.ndarray:
    """4x4 scale; uniform when only ``sx`` is given."""
    if sy is None and sz is None:
        sy = sz = sx
    elif sy is None or sz is None:
        raise ValueError("give either one scale factor or all three")
    return _matrix(4, sx, 0, 0, 0, 0, sy, 0, 0, 0, 0, sz, 0, 0, 0, 0, 1)


def graph_orthographic3(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    """4x4 orthographic projection of the given box."""
    return _matrix(
        4,
        2 / (right - left), 0, 0, 0,
        0, 2 / (top - bottom), 0, 0,
        0, 0, -2 / (far - near), 0,
        -(right + left) / (right - left), -(top + bottom) / (top - bottom),
        -(far + near) / (far - near), 1,
    )


def perspective(aspect_ratio: float, fov: float, near: float, far: float) -> np.ndarray:
    """4x4 perspective projection with vertical field of view ``fov`` (radians)."""
    t = math.tan(0.5 * fov) * near
    b = -t
    r = t * aspect_ratio
    l = -r  # noqa: E741
    return _matrix(
        4,
        2 * near / (r - l), 0, 0, 0,
        0, 2 * near / (t - b), 0, 0,
        (r + l) / (r - l), (t + b) / (t - b), -(far + near) / (far - near), -1,
        0, 0, -2 * far * near / (far - near), 0,
    )