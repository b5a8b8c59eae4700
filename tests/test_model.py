import math

import pytest

from hexmap import Axial, HexMap, InvalidParameter, MOUNTAIN, PLAIN, build_grid


def test_lookup_present_and_absent():
    m = build_grid(2, 1.0)
    assert (1, -1) in m
    assert Axial(1, -1) in m
    assert m.get((2, 0)) is m[Axial(2, 0)]
    assert (3, 0) not in m
    assert (2, 1) not in m  # s = -3
    assert m.get((3, 0)) is None
    with pytest.raises(KeyError):
        m[(0, 3)]


def test_enumeration_covers_every_tile():
    m = build_grid(3, 1.0)
    coords = [t.coord for t in m]
    assert len(coords) == len(set(coords)) == len(m)
    assert sorted(coords) == sorted(m.coords())
    assert len(m.tiles()) == len(m)


def test_view_is_read_only():
    m = build_grid(1, 1.0)
    view = m.view()
    assert len(view) == 7
    with pytest.raises(TypeError):
        view[(5, 5)] = None


def test_tile_identity_is_fixed():
    tile = build_grid(1, 1.0)[(1, 0)]
    with pytest.raises(AttributeError):
        tile.coord = Axial(0, 0)
    with pytest.raises(AttributeError):
        tile.position = (0.0, 0.0)
    tile.terrain = MOUNTAIN
    assert tile.terrain == MOUNTAIN
    assert (tile.q, tile.r) == (1, 0)


def test_rebuild_discards_previous_contents():
    m = build_grid(3, 1.0)
    m[(0, 0)].terrain = MOUNTAIN
    m.rebuild(1, 2.0)
    assert len(m) == 7
    assert m.radius == 1 and m.hex_size == 2.0
    assert m[(0, 0)].terrain == PLAIN
    assert (3, 0) not in m


@pytest.mark.parametrize("radius,size", [(-1, 1.0), (5, 0.0)])
def test_failed_rebuild_keeps_contents(radius, size):
    m = build_grid(2, 1.0)
    m[(1, 1)].terrain = MOUNTAIN
    before = m.tiles()
    with pytest.raises(InvalidParameter):
        m.rebuild(radius, size)
    assert m.tiles() == before
    assert m.radius == 2
    assert m[(1, 1)].terrain == MOUNTAIN


def test_empty_map():
    m = HexMap()
    assert len(m) == 0
    assert list(m) == []
    assert m.tile_at(0.0, 0.0) is None


def test_tile_at_world_point():
    m = build_grid(2, 1.5)
    for tile in m:
        x, y = tile.position
        assert m.tile_at(x + 0.2, y - 0.1) is tile
    assert m.tile_at(100.0, 100.0) is None


def test_neighbors_stay_inside_map():
    m = build_grid(1, 1.0)
    assert len(list(m.neighbors((0, 0)))) == 6
    assert {t.coord for t in m.neighbors((1, 0))} == {(1, -1), (0, 0), (0, 1)}


def test_outline_uses_map_hex_size():
    m = build_grid(1, 2.0)
    tile = m[(0, 1)]
    pts = m.outline((0, 1))
    assert len(pts) == 6
    cx, cy = tile.position
    for x, y in pts:
        assert math.hypot(x - cx, y - cy) == pytest.approx(2.0)
