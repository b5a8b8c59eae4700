# noise.py - coherent 2D noise fields for terrain, bounded to [0,1]
from __future__ import annotations
from numbers import Integral
from typing import Callable

import numpy as np

from .errors import InvalidParameter

NoiseFn = Callable[[float, float], float]

# numpy's RandomState only accepts 32-bit unsigned seeds
MAX_SEED = 2 ** 32 - 1

# Eight gradient directions: axes and diagonals
_GRADIENTS = np.array([(1.0, 1.0), (-1.0, 1.0), (1.0, -1.0), (-1.0, -1.0),
                       (1.0, 0.0), (-1.0, 0.0), (0.0, 1.0), (0.0, -1.0)])


def check_seed(seed) -> int:
    if isinstance(seed, bool) or not isinstance(seed, Integral) or not 0 <= seed <= MAX_SEED:
        raise InvalidParameter(f"seed must be an integer in [0, {MAX_SEED}], got {seed!r}")
    return int(seed)


def _fade(t: np.ndarray) -> np.ndarray:
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(a: np.ndarray, b: np.ndarray, t: np.ndarray) -> np.ndarray:
    return a + t * (b - a)


def _grad(h: np.ndarray, x: np.ndarray, y: np.ndarray) -> np.ndarray:
    g = _GRADIENTS[h & 7]
    return g[..., 0] * x + g[..., 1] * y


def _permutation(rng: np.random.RandomState) -> np.ndarray:
    perm = rng.permutation(256)
    # doubled so lookups of p[X + 1] + Y + 1 never wrap
    return np.concatenate([perm, perm]).astype(np.int64)


def _lattice(x, y):
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    xi = np.floor(x)
    yi = np.floor(y)
    return xi.astype(np.int64), yi.astype(np.int64), x - xi, y - yi


class PerlinNoise:
    """Classic gradient noise over the plane.

    The permutation table comes from ``np.random.RandomState(seed)``, so two
    instances with the same seed return identical values everywhere. Values
    at integer lattice points are exactly 0.5.  :meth:`sample` evaluates
    whole coordinate arrays at once; calling the instance evaluates one point.
    """

    def __init__(self, seed: int = 0) -> None:
        self.seed = check_seed(seed)
        self._p = _permutation(np.random.RandomState(self.seed))

    def __repr__(self) -> str:
        return f"PerlinNoise(seed={self.seed})"

    def raw(self, x, y) -> np.ndarray:
        """Signed noise in [-1, 1]."""
        xi, yi, xf, yf = _lattice(x, y)
        X = xi & 255
        Y = yi & 255
        p = self._p
        aa = p[p[X] + Y]
        ab = p[p[X] + Y + 1]
        ba = p[p[X + 1] + Y]
        bb = p[p[X + 1] + Y + 1]
        u = _fade(xf)
        v = _fade(yf)
        x1 = _lerp(_grad(aa, xf, yf), _grad(ba, xf - 1.0, yf), u)
        x2 = _lerp(_grad(ab, xf, yf - 1.0), _grad(bb, xf - 1.0, yf - 1.0), u)
        return _lerp(x1, x2, v)

    def sample(self, xs, ys) -> np.ndarray:
        return np.clip((self.raw(xs, ys) + 1.0) * 0.5, 0.0, 1.0)

    def __call__(self, x: float, y: float) -> float:
        return float(self.sample(x, y))


class ValueNoise:
    """Lattice value noise: random heights at integer points, smoothly blended."""

    def __init__(self, seed: int = 0) -> None:
        self.seed = check_seed(seed)
        rng = np.random.RandomState(self.seed)
        self._p = _permutation(rng)
        self._values = rng.rand(256)

    def __repr__(self) -> str:
        return f"ValueNoise(seed={self.seed})"

    def _at(self, i: np.ndarray, j: np.ndarray) -> np.ndarray:
        p = self._p
        return self._values[p[p[i & 255] + (j & 255)]]

    def sample(self, xs, ys) -> np.ndarray:
        xi, yi, xf, yf = _lattice(xs, ys)
        u = _fade(xf)
        v = _fade(yf)
        top = _lerp(self._at(xi, yi), self._at(xi + 1, yi), u)
        bottom = _lerp(self._at(xi, yi + 1), self._at(xi + 1, yi + 1), u)
        return _lerp(top, bottom, v)

    def __call__(self, x: float, y: float) -> float:
        return float(self.sample(x, y))


class Fractal:
    """Sum of ``octaves`` layers of a noise field (fBm).

    The result is normalized by the total amplitude, so a [0,1] input field
    stays in [0,1].  ``base`` must accept numpy arrays when :meth:`sample`
    is used.
    """

    def __init__(self, base, octaves: int, persistence: float, lacunarity: float) -> None:
        self.base = base
        self.octaves = octaves
        self.persistence = persistence
        self.lacunarity = lacunarity

    def __repr__(self) -> str:
        return f"Fractal({self.base!r}, octaves={self.octaves})"

    def sample(self, xs, ys):
        sample_fn = getattr(self.base, "sample", self.base)
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)
        out = np.zeros(np.broadcast(xs, ys).shape)
        amp = 1.0
        freq = 1.0
        total = 0.0
        for _ in range(self.octaves):
            out += np.asarray(sample_fn(xs * freq, ys * freq)) * amp
            total += amp
            amp *= self.persistence
            freq *= self.lacunarity
        if total > 0:
            out /= total
        return out

    def __call__(self, x: float, y: float) -> float:
        return float(self.sample(x, y))


def fractal(noise_fn, octaves: int = 1, persistence: float = 0.5,
            lacunarity: float = 2.0):
    """Layer ``octaves`` copies of ``noise_fn`` at rising frequency."""
    if octaves < 1:
        raise InvalidParameter(f"octaves must be >= 1, got {octaves}")
    if octaves == 1:
        return noise_fn
    return Fractal(noise_fn, octaves, persistence, lacunarity)


NOISE_KINDS = {
    "perlin": PerlinNoise,
    "value": ValueNoise,
}


def make_noise(kind: str = "perlin", seed: int = 0, octaves: int = 1,
               persistence: float = 0.5, lacunarity: float = 2.0):
    try:
        cls = NOISE_KINDS[kind]
    except KeyError:
        raise InvalidParameter(
            f"unknown noise kind {kind!r}; expected one of {sorted(NOISE_KINDS)}"
        ) from None
    return fractal(cls(seed), octaves, persistence, lacunarity)


_DEFAULT_PERLIN = PerlinNoise(0)


def perlin_noise(x: float, y: float) -> float:
    """Perlin noise with seed 0; the default field for classification."""
    return _DEFAULT_PERLIN(x, y)
