import dataclasses
import logging

import yaml

log = logging.getLogger(__name__)

# the original console was 80x50 with a 10 column sidebar and a 5 row message log
MAP_WIDTH = 70
MAP_HEIGHT = 45

# largest side a generated grid may have
MAX_MAP_SIZE = 1000


class ConfigError(ValueError):
    pass


@dataclasses.dataclass(frozen=True)
class GeneratorConfig:
    min_room_size: int = 4
    max_room_size: int = 12
    max_room_attempts: int = 30
    max_connection_distance: int = 20

    def __post_init__(self):
        if self.min_room_size < 1:
            raise ConfigError("min_room_size must be at least 1, got {}".format(self.min_room_size))
        if self.max_room_size <= self.min_room_size:
            raise ConfigError("max_room_size ({}) must be greater than min_room_size ({})".format(
                self.max_room_size, self.min_room_size))
        if self.max_room_attempts < 1:
            # the first attempt always succeeds and provides the start position
            raise ConfigError("max_room_attempts must be at least 1, got {}".format(self.max_room_attempts))
        if self.max_connection_distance < 0:
            raise ConfigError("max_connection_distance cannot be negative, got {}".format(
                self.max_connection_distance))

    def check_fits(self, width, height):
        # sampling draws x from [0, width - w), so the widest room must leave a column spare
        if width <= 0 or height <= 0:
            raise ConfigError("grid needs a positive size, got {}x{}".format(width, height))
        if width > MAX_MAP_SIZE or height > MAX_MAP_SIZE:
            raise ConfigError("grid sides are capped at {}, got {}x{}".format(MAX_MAP_SIZE, width, height))
        if self.max_room_size > width or self.max_room_size > height:
            raise ConfigError("rooms up to {} cells do not fit a {}x{} grid".format(
                self.max_room_size - 1, width, height))

    @classmethod
    def from_dict(cls, data):
        fields = {f.name for f in dataclasses.fields(cls)}
        unknown = set(data) - fields
        if unknown:
            raise ConfigError("unknown config keys: {}".format(", ".join(sorted(unknown))))
        for k, v in data.items():
            # bool is an int subclass, yaml turns yes/true into one
            if isinstance(v, bool) or not isinstance(v, int):
                raise ConfigError("{} must be a whole number, got {!r}".format(k, v))
        return cls(**data)


def load_config(path):
    try:
        with open(path, "rb") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError("cannot read {}: {}".format(path, e)) from e
    except yaml.YAMLError as e:
        raise ConfigError("{} is not valid yaml: {}".format(path, e)) from e

    if not isinstance(data, dict):
        raise ConfigError("{} must contain a mapping".format(path))

    config = GeneratorConfig.from_dict(data)
    log.debug("loaded %s from %s", config, path)
    return config
