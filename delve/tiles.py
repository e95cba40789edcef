import dataclasses
from enum import Enum


class TerrainTypes(str, Enum):
    FLOOR = "floor"
    WALL = "wall"


GLYPHS = {
    TerrainTypes.FLOOR: ".",
    TerrainTypes.WALL: "#",
}


@dataclasses.dataclass(frozen=True)
class Tile(object):
    key: TerrainTypes
    blocked: bool = False
    blocked_sight: bool = False

    @property
    def glyph(self):
        return GLYPHS[self.key]


# tiles never change once made, so every cell shares one of these
FLOOR = Tile(TerrainTypes.FLOOR)
WALL = Tile(TerrainTypes.WALL, blocked=True, blocked_sight=True)
