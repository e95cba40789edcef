import random

import pytest


class ScriptedRandom(random.Random):
    """
    Hands out queued values first, then falls back to a seeded generator.
    """

    def __init__(self, values, seed=0):
        super(ScriptedRandom, self).__init__(seed)
        self.values = list(values)

    def _next(self, low, high):
        value = self.values.pop(0)
        assert low <= value < high, "scripted {} outside [{}, {})".format(value, low, high)
        return value

    def randrange(self, start, stop=None, step=1):
        if stop is None:
            start, stop = 0, start
        if self.values:
            return self._next(start, stop)
        return super(ScriptedRandom, self).randrange(start, stop, step)

    def randint(self, a, b):
        if self.values:
            return self._next(a, b + 1)
        return super(ScriptedRandom, self).randint(a, b)


@pytest.fixture
def scripted():
    return ScriptedRandom
