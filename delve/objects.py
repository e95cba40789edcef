import dataclasses
import logging
from typing import Tuple

log = logging.getLogger(__name__)

WHITE = (255, 255, 255)


@dataclasses.dataclass
class Object(object):
    """
    Something standing on the grid, drawn as a single glyph.
    """

    x: int
    y: int
    glyph: str = "@"
    color: Tuple[int, int, int] = WHITE
    name: str = None

    def __str__(self):
        return self.name or self.glyph

    @property
    def pos(self):
        return self.x, self.y

    def move_by(self, dx, dy, grid):
        x = self.x + dx
        y = self.y + dy

        if grid.is_blocked(x, y):
            log.debug("%s blocked at (%d, %d)", self, x, y)
            return False

        self.x = x
        self.y = y
        return True


def spawn_player(start):
    x, y = start
    return Object(x, y, name="player")
