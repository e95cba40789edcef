import io
import logging

import msgpack
from PIL import Image, ImageDraw

from .grid import Grid
from .tiles import FLOOR, WALL

log = logging.getLogger(__name__)

TILESIZE = 10

COLOR_DARK_GROUND = (75, 75, 75)
COLOR_DARK_WALL = (25, 25, 25)


def to_text(grid, objects=()):
    rows = [[tile.glyph for tile in row] for row in grid.tiles]
    for obj in objects:
        rows[obj.y][obj.x] = obj.glyph
    return "\n".join("".join(row) for row in rows)


def pack(grid, start):
    """
    Serializes a dungeon for a remote client.

    Cells are sent as two 0/1 layers so a renderer can tell walking and seeing
    apart without knowing about tile kinds.
    """
    return msgpack.packb({
        "width": grid.width,
        "height": grid.height,
        "start": list(start) if start else None,
        "blocked": [[int(tile.blocked) for tile in row] for row in grid.tiles],
        "blocked_sight": [[int(tile.blocked_sight) for tile in row] for row in grid.tiles],
    })


def unpack(blob):
    obj = msgpack.unpackb(blob, raw=False)
    tiles = [[WALL if cell else FLOOR for cell in row] for row in obj["blocked"]]
    grid = Grid(obj["width"], obj["height"], tiles)
    start = tuple(obj["start"]) if obj["start"] is not None else None
    return grid, start


def render_image(grid, objects=(), tilesize=TILESIZE):
    image = Image.new("RGB", (grid.width * tilesize, grid.height * tilesize), COLOR_DARK_WALL)
    draw = ImageDraw.Draw(image)

    def _fill(x, y, color):
        l = x * tilesize
        t = y * tilesize
        draw.rectangle((l, t, l + tilesize - 1, t + tilesize - 1), fill=color)

    for y in range(grid.height):
        for x in range(grid.width):
            if not grid.blocks_sight(x, y):
                _fill(x, y, COLOR_DARK_GROUND)

    for obj in objects:
        _fill(obj.x, obj.y, obj.color)

    return image


def render_png(grid, objects=(), tilesize=TILESIZE):
    out = io.BytesIO()
    render_image(grid, objects, tilesize).save(out, format="png")
    return out.getvalue()
