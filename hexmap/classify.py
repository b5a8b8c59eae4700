# classify.py - assign terrain to map tiles from world-space noise
from __future__ import annotations

import logging
import math
from typing import Dict, Tuple

import numpy as np

from .errors import InvalidParameter, NoiseEvaluationFailure
from .hexgrid import Axial
from .model import HexMap
from .noise import NoiseFn, perlin_noise
from .terrain import Terrain, terrain_for

logger = logging.getLogger(__name__)


def check_thresholds(water_threshold: float, mountain_threshold: float) -> None:
    for name, value in (("water_threshold", water_threshold),
                        ("mountain_threshold", mountain_threshold)):
        if not (0.0 <= value <= 1.0):
            raise InvalidParameter(f"{name} must be in [0,1], got {value}")
    if water_threshold > mountain_threshold:
        logger.warning("water_threshold %.3f > mountain_threshold %.3f: "
                       "no plain band, values in [%.3f, %.3f) become water",
                       water_threshold, mountain_threshold,
                       mountain_threshold, water_threshold)
    elif water_threshold == mountain_threshold:
        logger.warning("water_threshold == mountain_threshold == %.3f: "
                       "plain band is that single value",
                       water_threshold)


def _sample_all(noise_fn, xs, ys):
    sample = getattr(noise_fn, "sample", None)
    if sample is not None:
        return np.asarray(sample(np.array(xs), np.array(ys)), dtype=np.float64).tolist()
    return [noise_fn(x, y) for x, y in zip(xs, ys)]


def classify_terrain(model: HexMap, noise_scale: float, water_threshold: float,
                     mountain_threshold: float, offset: Tuple[float, float] = (0.0, 0.0),
                     noise_fn: NoiseFn = perlin_noise) -> None:
    """Set every tile's terrain from ``noise_fn`` sampled at its world position.

    Each tile samples ``((x + offset_x) * noise_scale, (y + offset_y) *
    noise_scale)``. Values below ``water_threshold`` are water, values above
    ``mountain_threshold`` are mountains and everything else, including both
    thresholds themselves, is plain. Shifting ``offset`` moves the map over a
    different part of the same field, which makes it act like a seed.  Noise
    objects with a ``sample(xs, ys)`` method are evaluated on all tiles at
    once; plain callables are called per tile.

    All samples are taken before any tile changes: if ``noise_fn`` raises, or
    returns a non-finite value (:class:`NoiseEvaluationFailure`), the map keeps
    its previous terrain.
    """
    if not math.isfinite(noise_scale) or noise_scale <= 0:
        raise InvalidParameter(f"noise_scale must be a positive finite number, got {noise_scale}")
    check_thresholds(water_threshold, mountain_threshold)
    ox, oy = offset

    tiles = model.tiles()
    xs = [(t.position.x + ox) * noise_scale for t in tiles]
    ys = [(t.position.y + oy) * noise_scale for t in tiles]
    values = _sample_all(noise_fn, xs, ys)

    assigned: Dict[Axial, Terrain] = {}
    for tile, value in zip(tiles, values):
        if not math.isfinite(value):
            raise NoiseEvaluationFailure(tile.coord, value)
        assigned[tile.coord] = terrain_for(value, water_threshold, mountain_threshold)

    for coord, terrain in assigned.items():
        model[coord].terrain = terrain
    logger.debug("classified %d tiles (scale=%g, offset=(%g, %g))",
                 len(assigned), noise_scale, ox, oy)
