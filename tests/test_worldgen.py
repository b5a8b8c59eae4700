import pytest

from hexmap import (
    HexMap, InvalidParameter, MapConfig, MOUNTAIN, PLAIN, WATER, build_grid,
    regenerate, render_ascii, summarize, terrain_counts,
)


def snapshot(m):
    return {t.coord: (t.position, t.terrain) for t in m}


def test_regenerate_deterministic():
    cfg = MapConfig(radius=8, seed=123, octaves=3)
    assert snapshot(regenerate(cfg)) == snapshot(regenerate(cfg))


def test_regenerate_default_config():
    m = regenerate()
    assert len(m) == 331
    assert m.radius == 10


def test_offset_moves_sample_window():
    seen = []

    def field(x, y):
        seen.append((x, y))
        return 0.5

    regenerate(MapConfig(radius=0, noise_scale=2.0, offset=(1.5, -0.5)), noise_fn=field)
    assert seen == [(3.0, -1.0)]


def test_regenerate_replaces_model_in_place():
    m = build_grid(5, 1.0)
    out = regenerate(MapConfig(radius=2, hex_size=3.0), model=m)
    assert out is m
    assert len(m) == 19
    assert m.hex_size == 3.0


@pytest.mark.parametrize("cfg", [MapConfig(radius=-1), MapConfig(hex_size=0.0)])
def test_failed_regenerate_leaves_model(cfg):
    m = regenerate(MapConfig(radius=3))
    before = snapshot(m)
    with pytest.raises(InvalidParameter):
        regenerate(cfg, model=m)
    assert snapshot(m) == before


def test_noise_failure_leaves_model():
    m = regenerate(MapConfig(radius=3))
    before = snapshot(m)

    def broken(x, y):
        raise ZeroDivisionError

    with pytest.raises(ZeroDivisionError):
        regenerate(MapConfig(radius=6), model=m, noise_fn=broken)
    assert snapshot(m) == before
    assert m.radius == 3


def test_counts_and_summary():
    m = regenerate(MapConfig(radius=10, noise_scale=1.0),
                   noise_fn=lambda x, y: min(1.0, max(0.0, 0.5 + x / 40.0)))
    counts = terrain_counts(m)
    assert sum(counts.values()) == len(m) == 331
    assert counts[WATER] > 0 and counts[PLAIN] > 0 and counts[MOUNTAIN] > 0
    text = summarize(m)
    assert "tiles=331" in text
    assert f"water={counts[WATER]}" in text


def test_render_ascii_shape():
    m = regenerate(MapConfig(radius=2), noise_fn=lambda x, y: 0.1)
    lines = render_ascii(m).splitlines()
    assert len(lines) == 5
    assert sum(line.count("~") for line in lines) == 19
    assert lines[2] == "~ ~ ~ ~ ~"
    assert lines[0] == "  ~ ~ ~"
    assert render_ascii(HexMap()) == ""
