import abc

QUIT = "quit"

INTENTS = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}


class ActionError(Exception):
    pass


class Action(object, metaclass=abc.ABCMeta):
    NAME = None

    @abc.abstractmethod
    def perform(self, obj, grid):
        pass


class MoveAction(Action):
    NAME = "move"

    def __init__(self, dx, dy):
        super(MoveAction, self).__init__()
        self.dx = dx
        self.dy = dy

    def __repr__(self):
        return "MoveAction({}, {})".format(self.dx, self.dy)

    def perform(self, obj, grid):
        return obj.move_by(self.dx, self.dy, grid)


def action_for(intent):
    """
    Turns a directional intent from the front end into an action.

    Returns None for quit so the caller can stop its loop.
    """
    if intent == QUIT:
        return None
    if intent not in INTENTS:
        raise ActionError("unknown intent {!r}".format(intent))
    dx, dy = INTENTS[intent]
    return MoveAction(dx, dy)
