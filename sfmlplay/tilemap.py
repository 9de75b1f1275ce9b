"""Tile maps built from a level grid and a tileset texture."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .vector import Vec2

TILE_SIZE = (32, 32)
LEVEL_WIDTH = 16
LEVEL_HEIGHT = 8

LEVEL: tuple[int, ...] = (
    0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1,
    0, 1, 1, 1, 1, 1, 1, 0, 0, 0, 0, 2, 0, 0, 0, 0,
    1, 1, 0, 0, 0, 0, 0, 0, 0, 3, 3, 3, 3, 3, 3, 3,
    0, 1, 0, 0, 2, 0, 3, 3, 3, 0, 1, 1, 1, 0, 0, 0,
    0, 1, 1, 0, 3, 3, 3, 0, 0, 0, 1, 1, 1, 2, 0, 0,
    0, 0, 1, 0, 3, 0, 2, 2, 0, 0, 1, 1, 1, 1, 2, 0,
    2, 0, 1, 0, 3, 0, 2, 2, 2, 0, 1, 1, 1, 1, 1, 1,
    0, 0, 1, 0, 3, 2, 2, 2, 0, 0, 0, 0, 1, 1, 1, 1,
)


@dataclass(frozen=True)
class Vertex:
    """A corner of a textured triangle."""

    position: Vec2
    tex_coords: Vec2


def _quad(x: int, y: int, w: int, h: int) -> list[Vec2]:
    # Two triangles: top-left, top-right, bottom-left / bottom-left, top-right, bottom-right.
    left, top = float(x * w), float(y * h)
    right, bottom = float((x + 1) * w), float((y + 1) * h)
    return [
        Vec2(left, top),
        Vec2(right, top),
        Vec2(left, bottom),
        Vec2(left, bottom),
        Vec2(right, top),
        Vec2(right, bottom),
    ]


def build_tile_vertices(
    tile_size: tuple[int, int],
    tiles: Sequence[int],
    width: int,
    height: int,
    tileset_width: int,
) -> list[Vertex]:
    """Build six vertices per tile, row by row, mapping each tile to its tileset cell."""
    tile_w, tile_h = tile_size
    if tile_w <= 0 or tile_h <= 0:
        raise ValueError("tile size must be positive")
    tiles_per_row = tileset_width // tile_w
    if tiles_per_row <= 0:
        raise ValueError("tileset is narrower than one tile")
    if len(tiles) < width * height:
        raise ValueError("not enough tiles for the requested map size")

    vertices: list[Vertex] = []
    for j in range(height):
        for i in range(width):
            tu, tv = divmod(tiles[i + j * width], tiles_per_row)[::-1]
            positions = _quad(i, j, tile_w, tile_h)
            tex_coords = _quad(tu, tv, tile_w, tile_h)
            vertices.extend(Vertex(p, t) for p, t in zip(positions, tex_coords))
    return vertices