"""Map container: axial coordinate -> tile record."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional

from .hexgrid import Axial, Point, hex_corners, neighbors_axial, world_to_axial
from .terrain import Terrain, PLAIN


@dataclass
class Tile:
    """One hex of the map.

    ``coord`` and ``position`` are fixed when the tile is built; only
    ``terrain`` changes afterwards, and only during classification.
    """

    coord: Axial
    position: Point
    terrain: Terrain = PLAIN

    def __setattr__(self, name, value):
        if name in ("coord", "position") and name in self.__dict__:
            raise AttributeError(f"Tile.{name} is read-only")
        super().__setattr__(name, value)

    @property
    def q(self) -> int:
        return self.coord.q

    @property
    def r(self) -> int:
        return self.coord.r


class HexMap:
    """Hexagon-shaped map of tiles keyed by axial coordinate.

    A map is filled by :func:`hexmap.builder.build_grid` (or :meth:`rebuild`)
    and classified by :func:`hexmap.classify.classify_terrain`. Everything
    else should treat it as read-only; :meth:`view` hands out a mapping that
    cannot be modified.
    """

    def __init__(self) -> None:
        self._tiles: Dict[Axial, Tile] = {}
        self.radius: Optional[int] = None
        self.hex_size: Optional[float] = None

    def __repr__(self) -> str:
        return f"HexMap(radius={self.radius}, hex_size={self.hex_size}, tiles={len(self._tiles)})"

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles.values())

    def __contains__(self, coord) -> bool:
        return tuple(coord) in self._tiles

    def __getitem__(self, coord) -> Tile:
        return self._tiles[tuple(coord)]

    def get(self, coord, default: Optional[Tile] = None) -> Optional[Tile]:
        return self._tiles.get(tuple(coord), default)

    def tiles(self) -> List[Tile]:
        return list(self._tiles.values())

    def coords(self) -> List[Axial]:
        return list(self._tiles.keys())

    def view(self) -> Mapping[Axial, Tile]:
        return MappingProxyType(self._tiles)

    def rebuild(self, radius: int, hex_size: float) -> "HexMap":
        """Discard all tiles and refill the map for ``radius``/``hex_size``.

        Parameters are validated before anything is cleared, so a rejected
        rebuild keeps the previous contents.
        """
        from .builder import grid_tiles

        tiles = grid_tiles(radius, hex_size)
        self._replace(tiles, int(radius), float(hex_size))
        return self

    def _replace(self, tiles: Dict[Axial, Tile], radius: int, hex_size: float) -> None:
        self._tiles = tiles
        self.radius = radius
        self.hex_size = hex_size

    def adopt(self, other: "HexMap") -> None:
        """Take over the contents of ``other`` in one step."""
        self._replace(other._tiles, other.radius, other.hex_size)

    # ------------------------------------------------------------------
    # Geometry lookups
    # ------------------------------------------------------------------

    def tile_at(self, x: float, y: float) -> Optional[Tile]:
        """Return the tile covering world point ``(x, y)``, if any."""
        if not self.hex_size:
            return None
        return self.get(world_to_axial(x, y, self.hex_size))

    def neighbors(self, coord) -> Iterator[Tile]:
        q, r = coord
        for n in neighbors_axial(q, r):
            tile = self._tiles.get(n)
            if tile is not None:
                yield tile

    def outline(self, coord) -> List[Point]:
        """Debug-draw outline (six vertices) of the tile at ``coord``."""
        tile = self[coord]
        return hex_corners(tile.position, self.hex_size)
