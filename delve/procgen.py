import random
import logging

from .config import GeneratorConfig
from .corridors import connect
from .geometry import Rect
from .grid import Grid

log = logging.getLogger(__name__)


def find_closest(candidate, rooms, exclude=None):
    """
    Index of the room whose center is nearest to the candidate's.

    ``exclude`` is the index of the candidate itself when it already sits in
    ``rooms``. Ties go to the earliest room.
    """
    best = None
    best_distance = None
    for i, room in enumerate(rooms):
        if i == exclude:
            continue
        d = candidate.distance(room)
        if best is None or d < best_distance:
            best, best_distance = i, d

    if best is None:
        raise ValueError("no room to compare against")
    return best


def _make_rng(rng):
    if isinstance(rng, random.Random):
        return rng
    return random.Random(rng)


class RoomPlacer(object):
    """
    Scatters rooms over a solid grid and joins each to its nearest
    predecessor with an L shaped corridor.

    Runs a fixed number of attempts; how many rooms survive depends on the
    overlap and distance checks.
    """

    def __init__(self, width, height, config=None, rng=None):
        self.config = config or GeneratorConfig()
        self.config.check_fits(width, height)
        self.width = width
        self.height = height
        self.rng = _make_rng(rng)

        self.grid = Grid.filled(width, height)
        self.rooms = []
        self.corridors = []
        self.start = None

    def sample(self):
        config = self.config
        w = self.rng.randrange(config.min_room_size, config.max_room_size)
        h = self.rng.randrange(config.min_room_size, config.max_room_size)
        x = self.rng.randrange(0, self.width - w)
        y = self.rng.randrange(0, self.height - h)
        return Rect.create(x, y, w, h)

    def accepts(self, candidate):
        if any(candidate.overlaps(room) for room in self.rooms):
            return False

        if not self.rooms:
            return True

        limit = self.config.max_connection_distance
        return any(candidate.distance(room) <= limit for room in self.rooms)

    def add_room(self, room):
        self.grid.carve_room(room)

        if not self.rooms:
            self.start = room.center
        else:
            closest = self.rooms[find_closest(room, self.rooms)]
            horizontal_first = bool(self.rng.randint(0, 1))
            connect(room.center, closest.center, self.grid, horizontal_first)
            self.corridors.append((room.center, closest.center, horizontal_first))

        self.rooms.append(room)

    def place(self):
        for attempt in range(self.config.max_room_attempts):
            candidate = self.sample()
            if self.accepts(candidate):
                log.debug("attempt %d: accepted %s as room %d", attempt, candidate, len(self.rooms))
                self.add_room(candidate)
            else:
                log.debug("attempt %d: rejected %s", attempt, candidate)

        log.info("placed %d rooms in %d attempts", len(self.rooms), self.config.max_room_attempts)
        return self.grid, self.start


def generate(width, height, config=None, rng=None):
    """
    Builds a dungeon and returns ``(grid, start)``.

    ``rng`` may be a ``random.Random`` or a seed; the start is the center of
    the first room placed.
    """
    log.info("generating dungeon...")
    grid, start = RoomPlacer(width, height, config, rng).place()
    log.info("dungeon done!")
    return grid, start
