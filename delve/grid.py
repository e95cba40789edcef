from .tiles import FLOOR, WALL


class Grid(object):
    """
    Fixed size tile map, stored row major as ``tiles[y][x]``.

    Starts out solid wall; carving only ever turns cells into floor.
    """

    def __init__(self, width, height, tiles):
        self.width = width
        self.height = height
        self.tiles = tiles

    @classmethod
    def filled(cls, width, height):
        if width <= 0 or height <= 0:
            raise ValueError("grid needs a positive size, got {}x{}".format(width, height))
        tiles = [[WALL for _ in range(width)] for __ in range(height)]
        return cls(width, height, tiles)

    def __repr__(self):
        return "Grid({}x{})".format(self.width, self.height)

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.width, self.height, self.tiles) == (other.width, other.height, other.tiles)

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def get_tile(self, x, y):
        if not self.in_bounds(x, y):
            raise IndexError("({}, {}) is outside a {}x{} grid".format(x, y, self.width, self.height))
        return self.tiles[y][x]

    def is_blocked(self, x, y):
        if not self.in_bounds(x, y):
            return True
        return self.tiles[y][x].blocked

    def blocks_sight(self, x, y):
        if not self.in_bounds(x, y):
            return True
        return self.tiles[y][x].blocked_sight

    def carve(self, x, y):
        if not self.in_bounds(x, y):
            raise IndexError("cannot carve ({}, {}) in a {}x{} grid".format(x, y, self.width, self.height))
        self.tiles[y][x] = FLOOR

    def carve_room(self, rect):
        for x, y in rect.cells():
            self.carve(x, y)

    # runs include both ends so the elbow of an L corridor is always floor
    def carve_horizontal(self, y, x1, x2):
        for x in range(min(x1, x2), max(x1, x2) + 1):
            self.carve(x, y)

    def carve_vertical(self, x, y1, y2):
        for y in range(min(y1, y2), max(y1, y2) + 1):
            self.carve(x, y)

    def floor_cells(self):
        return [(x, y) for y, row in enumerate(self.tiles) for x, tile in enumerate(row) if not tile.blocked]

    def reachable_from(self, x, y):
        """
        Flood fills floor from (x, y) over 4-neighbours and returns the set of
        reached cells.
        """
        if self.is_blocked(x, y):
            return set()

        seen = {(x, y)}
        remaining = [(x, y)]
        while remaining:
            cx, cy = remaining.pop()
            for dx, dy in ((0, -1), (1, 0), (0, 1), (-1, 0)):
                pos = (cx + dx, cy + dy)
                if pos in seen or self.is_blocked(*pos):
                    continue
                seen.add(pos)
                remaining.append(pos)
        return seen


def is_blocked(grid, x, y):
    return grid.is_blocked(x, y)
