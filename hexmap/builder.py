# builder.py - hexagon-shaped tile grid in axial coordinates
from __future__ import annotations

import logging
import math
from numbers import Integral, Real
from typing import Dict

from .errors import InvalidParameter
from .hexgrid import Axial, axial_to_world_flat, hex_region
from .model import HexMap, Tile
from .terrain import PLAIN

logger = logging.getLogger(__name__)


def check_grid_params(radius: int, hex_size: float) -> None:
    """Raise :class:`InvalidParameter` unless ``radius``/``hex_size`` describe a real grid."""
    if isinstance(radius, bool) or not isinstance(radius, Integral):
        raise InvalidParameter(f"radius must be an integer, got {radius!r}")
    if radius < 0:
        raise InvalidParameter(f"radius must be >= 0, got {radius}")
    if isinstance(hex_size, bool) or not isinstance(hex_size, Real):
        raise InvalidParameter(f"hex_size must be a number, got {hex_size!r}")
    if not math.isfinite(hex_size) or hex_size <= 0:
        raise InvalidParameter(f"hex_size must be a positive finite number, got {hex_size}")


def grid_tiles(radius: int, hex_size: float) -> Dict[Axial, Tile]:
    """Return fresh plain tiles for every hex within ``radius`` of the origin."""
    check_grid_params(radius, hex_size)
    radius = int(radius)
    hex_size = float(hex_size)
    tiles: Dict[Axial, Tile] = {}
    for coord in hex_region(radius):
        pos = axial_to_world_flat(coord.q, coord.r, hex_size)
        tiles[coord] = Tile(coord=coord, position=pos, terrain=PLAIN)
    logger.debug("built %d tiles (radius=%d, hex_size=%g)", len(tiles), radius, hex_size)
    return tiles


def build_grid(radius: int, hex_size: float) -> HexMap:
    """Build a new :class:`HexMap` of all-plain tiles.

    The map holds exactly ``3*radius**2 + 3*radius + 1`` tiles laid out
    flat-top, with ``(0, 0)`` at the world origin. A negative ``radius`` or
    a non-positive ``hex_size`` raises :class:`InvalidParameter`.
    """
    return HexMap().rebuild(radius, hex_size)
