"""Seeded Perlin gradient noise in two and three dimensions."""

from __future__ import annotations

import math
import random


def _fade(t: float) -> float:
    # Improved Perlin fade curve: 6t^5 - 15t^4 + 10t^3.
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def _grad2d(hash_value: int, x: float, y: float) -> float:
    h = hash_value & 3
    if h == 0:
        return x + y
    if h == 1:
        return -x + y
    if h == 2:
        return x - y
    return -x - y


def _grad3d(hash_value: int, x: float, y: float, z: float) -> float:
    h = hash_value & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = z
    return (u if h & 1 == 0 else -u) + (v if h & 2 == 0 else -v)


class PerlinNoise:
    """Deterministic Perlin noise generator driven by a seed."""

    def __init__(self, seed: int) -> None:
        self._seed = seed
        base = list(range(256))
        random.Random(seed).shuffle(base)
        # Doubled so corner hashing never needs to wrap.
        self._perm = tuple(base + base)

    @property
    def seed(self) -> int:
        """The seed this generator was built with."""
        return self._seed

    def noise2d(self, x: float, y: float) -> float:
        """Single-octave 2D noise, roughly in ``[-1, 1]``."""
        perm = self._perm
        xi = math.floor(x)
        yi = math.floor(y)
        xf = x - xi
        yf = y - yi
        xi &= 255
        yi &= 255

        u = _fade(xf)
        v = _fade(yf)

        aa = perm[perm[xi] + yi]
        ab = perm[perm[xi] + yi + 1]
        ba = perm[perm[xi + 1] + yi]
        bb = perm[perm[xi + 1] + yi + 1]

        x1 = _lerp(_grad2d(aa, xf, yf), _grad2d(ba, xf - 1.0, yf), u)
        x2 = _lerp(_grad2d(ab, xf, yf - 1.0), _grad2d(bb, xf - 1.0, yf - 1.0), u)
        return _lerp(x1, x2, v)

    def noise3d(self, x: float, y: float, z: float) -> float:
        """Single-octave 3D noise, roughly in ``[-1, 1]``."""
        perm = self._perm
        xi = math.floor(x)
        yi = math.floor(y)
        zi = math.floor(z)
        xf = x - xi
        yf = y - yi
        zf = z - zi
        xi &= 255
        yi &= 255
        zi &= 255

        u = _fade(xf)
        v = _fade(yf)
        w = _fade(zf)

        aaa = perm[perm[perm[xi] + yi] + zi]
        aba = perm[perm[perm[xi] + yi + 1] + zi]
        aab = perm[perm[perm[xi] + yi] + zi + 1]
        abb = perm[perm[perm[xi] + yi + 1] + zi + 1]
        baa = perm[perm[perm[xi + 1] + yi] + zi]
        bba = perm[perm[perm[xi + 1] + yi + 1] + zi]
        bab = perm[perm[perm[xi + 1] + yi] + zi + 1]
        bbb = perm[perm[perm[xi + 1] + yi + 1] + zi + 1]

        x1 = _lerp(_grad3d(aaa, xf, yf, zf), _grad3d(baa, xf - 1.0, yf, zf), u)
        x2 = _lerp(_grad3d(aba, xf, yf - 1.0, zf),
                   _grad3d(bba, xf - 1.0, yf - 1.0, zf), u)
        y1 = _lerp(x1, x2, v)

        x3 = _lerp(_grad3d(aab, xf, yf, zf - 1.0),
                   _grad3d(bab, xf - 1.0, yf, zf - 1.0), u)
        x4 = _lerp(_grad3d(abb, xf, yf - 1.0, zf - 1.0),
                   _grad3d(bbb, xf - 1.0, yf - 1.0, zf - 1.0), u)
        y2 = _lerp(x3, x4, v)

        return _lerp(y1, y2, w)

    def octave_noise2d(self, x: float, y: float, octaves: int,
                       persistence: float, lacunarity: float,
                       frequency: float) -> float:
        """Fractal 2D noise summed over octaves and normalised by total amplitude."""
        if octaves < 1:
            raise ValueError("octaves must be at least 1")
        total = 0.0
        amplitude = 1.0
        max_amplitude = 0.0
        for _ in range(octaves):
            total += amplitude * self.noise2d(x * frequency, y * frequency)
            max_amplitude += amplitude
            amplitude *= persistence
            frequency *= lacunarity
        return total / max_amplitude

    def octave_noise3d(self, x: float, y: float, z: float, octaves: int,
                       persistence: float, lacunarity: float,
                       frequency: float) -> float:
        """Fractal 3D noise summed over octaves and normalised by total amplitude."""
        if octaves < 1:
            raise ValueError("octaves must be at least 1")
        total = 0.0
        amplitude = 1.0
        max_amplitude = 0.0
        for _ in range(octaves):
            total += amplitude * self.noise3d(x * frequency, y * frequency,
                                              z * frequency)
            max_amplitude += amplitude
            amplitude *= persistence
            frequency *= lacunarity
        return total / max_amplitude