from __future__ import annotations
from enum import IntEnum


class Terrain(IntEnum):
    WATER = 0
    PLAIN = 1
    MOUNTAIN = 2


WATER, PLAIN, MOUNTAIN = Terrain.WATER, Terrain.PLAIN, Terrain.MOUNTAIN

# Single-character glyphs for text views of a map
GLYPHS = {
    WATER: "~",
    PLAIN: ".",
    MOUNTAIN: "^",
}


def terrain_for(value: float, water_threshold: float, mountain_threshold: float) -> Terrain:
    """Map a noise sample to a terrain category.

    Both bounds are strict: a value equal to either threshold is a plain.
    With equal thresholds the plain band shrinks to that single value.  With
    ``water_threshold`` above ``mountain_threshold`` the band is empty: the
    water test runs first, so values in ``[mountain_threshold,
    water_threshold)`` become water and everything from ``water_threshold``
    up is mountain.
    """
    if value < water_threshold:
        return WATER
    if value > mountain_threshold:
        return MOUNTAIN
    return PLAIN
