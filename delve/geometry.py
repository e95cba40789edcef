import math
import collections


class Rect(collections.namedtuple("Rect", ["x1", "y1", "x2", "y2"])):
    """
    Axis aligned room bounds, half open on the upper edge.

    A room of width w carves exactly w columns: [x1, x2) x [y1, y2).
    """

    __slots__ = ()

    @classmethod
    def create(cls, x, y, width, height):
        if width <= 0 or height <= 0:
            raise ValueError("rect needs a positive size, got {}x{}".format(width, height))
        return cls(x, y, x + width, y + height)

    @property
    def width(self):
        return self.x2 - self.x1

    @property
    def height(self):
        return self.y2 - self.y1

    @property
    def center(self):
        return (self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2

    def contains(self, x, y):
        return self.x1 <= x < self.x2 and self.y1 <= y < self.y2

    def cells(self):
        for y in range(self.y1, self.y2):
            for x in range(self.x1, self.x2):
                yield x, y

    def overlaps(self, other):
        # closed intervals, rooms sharing an edge count as overlapping
        return (
            self.x1 <= other.x2 and
            self.x2 >= other.x1 and
            self.y1 <= other.y2 and
            self.y2 >= other.y1
        )

    def distance(self, other):
        ax, ay = self.center
        bx, by = other.center
        return int(round(math.hypot(bx - ax, by - ay)))
