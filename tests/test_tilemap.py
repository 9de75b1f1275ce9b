import pytest

from sfmlplay.tilemap import (
    LEVEL,
    LEVEL_HEIGHT,
    LEVEL_WIDTH,
    TILE_SIZE,
    Vertex,
    build_tile_vertices,
)
from sfmlplay.vector import Vec2


def test_single_tile_corners():
    vertices = build_tile_vertices((32, 32), [0], 1, 1, 128)
    assert len(vertices) == 6
    assert vertices[0] == Vertex(Vec2(0.0, 0.0), Vec2(0.0, 0.0))
    assert {v.position for v in vertices} == {
        Vec2(0.0, 0.0),
        Vec2(32.0, 0.0),
        Vec2(0.0, 32.0),
        Vec2(32.0, 32.0),
    }


def test_level_vertex_count():
    vertices = build_tile_vertices(TILE_SIZE, LEVEL, LEVEL_WIDTH, LEVEL_HEIGHT, 128)
    assert len(LEVEL) == LEVEL_WIDTH * LEVEL_HEIGHT
    assert len(vertices) == LEVEL_WIDTH * LEVEL_HEIGHT * 6


def test_tile_positions_cover_grid():
    vertices = build_tile_vertices(TILE_SIZE, LEVEL, LEVEL_WIDTH, LEVEL_HEIGHT, 128)
    tw, th = TILE_SIZE
    xs = {v.position.x for v in vertices}
    ys = {v.position.y for v in vertices}
    assert min(xs) == 0.0 and max(xs) == LEVEL_WIDTH * tw
    assert min(ys) == 0.0 and max(ys) == LEVEL_HEIGHT * th


def test_tex_coords_stay_within_tileset():
    vertices = build_tile_vertices(TILE_SIZE, LEVEL, LEVEL_WIDTH, LEVEL_HEIGHT, 128)
    for v in vertices:
        assert 0 <= v.tex_coords.x <= 128
        assert v.tex_coords.y >= 0


def test_tile_number_wraps_to_next_tileset_row():
    # Tileset two tiles wide: tile 3 sits at column 1, row 1.
    vertices = build_tile_vertices((16, 16), [3], 1, 1, 32)
    assert vertices[0].tex_coords == Vec2(16.0, 16.0)
    assert vertices[5].tex_coords == Vec2(32.0, 32.0)


def test_second_row_tile_is_placed_below_first():
    vertices = build_tile_vertices((8, 8), [0, 0, 0, 0], 2, 2, 8)
    third_tile = vertices[12:18]
    assert third_tile[0].position == Vec2(0.0, 8.0)


def test_too_few_tiles_raises():
    with pytest.raises(ValueError):
        build_tile_vertices((32, 32), [0, 1], 2, 2, 128)


def test_tileset_narrower_than_tile_raises():
    with pytest.raises(ValueError):
        build_tile_vertices((32, 32), [0], 1, 1, 16)