from .actions import ActionError, MoveAction, action_for
from .config import GeneratorConfig, ConfigError
from .grid import Grid, is_blocked
from .objects import Object, spawn_player
from .procgen import generate

__all__ = [
    "ActionError",
    "MoveAction",
    "action_for",
    "GeneratorConfig",
    "ConfigError",
    "Grid",
    "is_blocked",
    "Object",
    "spawn_player",
    "generate",
]
