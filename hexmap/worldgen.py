# worldgen.py - one-shot pipeline: grid, then terrain
from __future__ import annotations

import logging
from typing import Dict, Optional

from .builder import build_grid
from .classify import classify_terrain
from .config import DEFAULT_CONFIG, MapConfig
from .model import HexMap
from .noise import NoiseFn, make_noise
from .terrain import GLYPHS, Terrain

logger = logging.getLogger(__name__)


def regenerate(config: Optional[MapConfig] = None, model: Optional[HexMap] = None,
               noise_fn: Optional[NoiseFn] = None) -> HexMap:
    """Generate a classified map from ``config``.

    The whole map is rebuilt every time.  With ``model`` given, its contents
    are replaced only once the new map is fully built and classified; any
    error leaves it exactly as it was.  ``noise_fn`` overrides the field
    described by the config's noise settings.  Returns the populated map
    (``model`` itself when supplied).
    """
    cfg = (config or DEFAULT_CONFIG).validate()
    if noise_fn is None:
        noise_fn = make_noise(cfg.noise, cfg.seed, cfg.octaves,
                              cfg.persistence, cfg.lacunarity)

    fresh = build_grid(cfg.radius, cfg.hex_size)
    classify_terrain(fresh, cfg.noise_scale, cfg.water_threshold,
                     cfg.mountain_threshold, cfg.offset, noise_fn)
    logger.info("generated map: radius=%d, %d tiles", cfg.radius, len(fresh))

    if model is None:
        return fresh
    model.adopt(fresh)
    return model


def terrain_counts(model: HexMap) -> Dict[Terrain, int]:
    counts = {t: 0 for t in Terrain}
    for tile in model:
        counts[tile.terrain] += 1
    return counts


def summarize(model: HexMap) -> str:
    counts = terrain_counts(model)
    total = len(model)
    parts = []
    for terrain, n in counts.items():
        pct = 100.0 * n / total if total else 0.0
        parts.append(f"{terrain.name.lower()}={n} ({pct:.1f}%)")
    return (f"radius={model.radius} hex_size={model.hex_size} tiles={total} | "
            + ", ".join(parts))


def render_ascii(model: HexMap) -> str:
    """Text view of the map, one line per row ``r``, indented to keep the hex shape."""
    if model.radius is None:
        return ""
    radius = model.radius
    lines = []
    for r in range(-radius, radius + 1):
        cells = []
        for q in range(-radius, radius + 1):
            tile = model.get((q, r))
            if tile is not None:
                cells.append(GLYPHS[tile.terrain])
        lines.append(" " * abs(r) + " ".join(cells))
    return "\n".join(lines)
