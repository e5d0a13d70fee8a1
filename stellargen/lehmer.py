"""Small, fast, seedable pseudo-random generator with single-precision helpers."""

from __future__ import annotations

import numpy as np

_MASK32 = 0xFFFFFFFF
_DEFAULT_SEED = 0x12345678
_INCREMENT = 0xE120FC15
_MULTIPLIER_1 = 0x4A39B70D
_MULTIPLIER_2 = 0x12FAD5C9

_INV_MAX = np.float32(1.0) / np.float32(_MASK32)
_MIN_UNIFORM = np.float32(1e-7)
_TWO_PI = np.float32(6.28318530718)
_POISSON_NORMAL_THRESHOLD = np.float32(30.0)


class Lehmer32:
    """Deterministic 32-bit generator; a zero seed is replaced by a fixed one."""

    def __init__(self, seed: int = 0) -> None:
        self._state = 0
        self._seed = 0
        self.set_seed(seed)

    def set_seed(self, seed: int) -> None:
        """Restart the sequence from ``seed``."""
        seed &= _MASK32
        self._state = seed if seed else _DEFAULT_SEED
        self._seed = self._state

    @property
    def seed(self) -> int:
        """The seed the current sequence started from."""
        return self._seed

    def next_uint32(self) -> int:
        """Next raw value in ``[0, 2**32)``."""
        self._state = (self._state + _INCREMENT) & _MASK32
        mix = self._state * _MULTIPLIER_1
        m1 = ((mix >> 32) ^ mix) & _MASK32
        mix = m1 * _MULTIPLIER_2
        return ((mix >> 32) ^ mix) & _MASK32

    def _next_f32(self) -> np.float32:
        return np.float32(self.next_uint32()) * _INV_MAX

    def next_float32(self) -> float:
        """Next value in ``[0, 1]`` computed in single precision."""
        return float(self._next_f32())

    def uniform_uint32(self, low: int, high: int) -> int:
        """Unsigned integer in ``[low, high]``; bounds may be given in any order."""
        if low > high:
            low, high = high, low
        span = (high - low + 1) & _MASK32
        value = self.next_uint32()
        if span == 0:
            return (low + value) & _MASK32
        return (low + value % span) & _MASK32

    def uniform_int32(self, low: int, high: int) -> int:
        """Signed integer in ``[low, high]``; bounds may be given in any order."""
        if low > high:
            low, high = high, low
        span = (high - low + 1) & _MASK32
        value = self.next_uint32()
        if span == 0:
            result = (low + value) & _MASK32
            return result - (1 << 32) if result >= 1 << 31 else result
        return low + value % span

    def uniform_float(self, low: float, high: float) -> float:
        """Single-precision float between ``low`` and ``high``."""
        lo, hi = np.float32(low), np.float32(high)
        if lo > hi:
            lo, hi = hi, lo
        return float(lo + (hi - lo) * self._next_f32())

    def gaussian(self, mean: float, stddev: float) -> float:
        """Normally distributed value (Box-Muller)."""
        u1 = self._next_f32()
        u2 = self._next_f32()
        if u1 < _MIN_UNIFORM:
            u1 = _MIN_UNIFORM
        z0 = np.sqrt(np.float32(-2.0) * np.log(u1)) * np.cos(_TWO_PI * u2)
        return float(np.float32(mean) + z0 * np.float32(stddev))

    def poisson(self, lam: float) -> int:
        """Poisson-distributed count; a normal approximation is used above 30."""
        lam32 = np.float32(lam)
        if lam32 <= 0:
            return 0
        if lam32 > _POISSON_NORMAL_THRESHOLD:
            x = np.float32(self.gaussian(lam32, np.sqrt(lam32)))
            return int(max(np.float32(0.0), x + np.float32(0.5)))

        limit = np.exp(-lam32)
        k = 0
        p = np.float32(1.0)
        while True:
            k += 1
            p = p * self._next_f32()
            if not p > limit:
                break
        return k - 1