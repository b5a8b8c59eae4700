# hexmap/__init__.py
# Hexagonal terrain map generation: grid building, noise, classification

from .hexgrid import (
    Axial, Point, SQRT3, axial_to_world_flat, world_to_axial, axial_round,
    in_hex_region, hex_count, hex_region, neighbors_axial, distance, hex_corners,
)
from .errors import HexMapError, InvalidParameter, NoiseEvaluationFailure
from .terrain import Terrain, WATER, PLAIN, MOUNTAIN, terrain_for
from .model import HexMap, Tile
from .builder import build_grid
from .noise import PerlinNoise, ValueNoise, Fractal, fractal, make_noise, perlin_noise, check_seed
from .classify import classify_terrain
from .config import MapConfig, DEFAULT_CONFIG, load_config
from .worldgen import regenerate, terrain_counts, summarize, render_ascii

__all__ = [
    "Axial", "Point", "SQRT3", "axial_to_world_flat", "world_to_axial", "axial_round",
    "in_hex_region", "hex_count", "hex_region", "neighbors_axial", "distance", "hex_corners",
    "HexMapError", "InvalidParameter", "NoiseEvaluationFailure",
    "Terrain", "WATER", "PLAIN", "MOUNTAIN", "terrain_for",
    "HexMap", "Tile",
    "build_grid",
    "PerlinNoise", "ValueNoise", "Fractal", "fractal", "make_noise", "perlin_noise", "check_seed",
    "classify_terrain",
    "MapConfig", "DEFAULT_CONFIG", "load_config",
    "regenerate", "terrain_counts", "summarize", "render_ascii",
]
