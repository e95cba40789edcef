import argparse
import logging
import sys
import time
import random

import uvicorn

from . import export, procgen, server
from .config import GeneratorConfig, ConfigError, MAP_WIDTH, MAP_HEIGHT, load_config
from .objects import spawn_player

PORT = 6543

FORMATS = ("text", "msgpack", "png")

log = logging.getLogger(__name__)


def write_output(data, path):
    if path in (None, "-"):
        if isinstance(data, bytes):
            sys.stdout.buffer.write(data)
        else:
            print(data)
        return

    mode = "wb" if isinstance(data, bytes) else "w"
    with open(path, mode) as f:
        f.write(data)
    log.info("wrote %s", path)


def serve(args, config):
    server.app.state.config = config
    server.app.state.width = args.width
    server.app.state.height = args.height

    log.info("serving dungeons on port %d", args.port)
    uvicorn.run(server.app, host="0.0.0.0", port=args.port)


def main(args):
    config = load_config(args.config) if args.config else GeneratorConfig()

    if args.serve:
        config.check_fits(args.width, args.height)
        serve(args, config)
        return 0

    log.info("generating with seed %s", args.seed)
    grid, start = procgen.generate(args.width, args.height, config, random.Random(args.seed))

    if args.format == "msgpack":
        data = export.pack(grid, start)
    elif args.format == "png":
        data = export.render_png(grid, [spawn_player(start)])
    else:
        data = export.to_text(grid, [spawn_player(start)])

    write_output(data, args.output)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(prog="delve", description="generate a room and corridor dungeon")
    parser.add_argument("--seed", type=int, default=int(time.time()))
    parser.add_argument("--width", type=int, default=MAP_WIDTH)
    parser.add_argument("--height", type=int, default=MAP_HEIGHT)
    parser.add_argument("--config", help="yaml file with generator settings")
    parser.add_argument("--format", choices=FORMATS, default="text")
    parser.add_argument("--output", help="file to write, stdout when omitted")
    parser.add_argument("--serve", action="store_true", help="run the http service instead")
    parser.add_argument("--port", type=int, default=PORT)
    parser.add_argument("--debug", action="store_true")
    return parser


def run(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO,
                        format='[%(asctime)s] %(levelname)s/%(name)s - %(message)s',
                        stream=sys.stderr)
    try:
        return main(args)
    except ConfigError as e:
        parser.error(str(e))
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(run())
