import random
import logging
import dataclasses
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import Response
from fastapi.middleware.cors import CORSMiddleware

from . import export, procgen
from .config import GeneratorConfig, ConfigError, MAP_WIDTH, MAP_HEIGHT
from .objects import spawn_player

log = logging.getLogger(__name__)

SEED_HEADER = "X-Dungeon-Seed"

app = FastAPI()
app.state.config = GeneratorConfig()
app.state.width = MAP_WIDTH
app.state.height = MAP_HEIGHT


@app.exception_handler(ConfigError)
async def handle_config_error(request: Request, e: ConfigError):
    log.warning("rejected %s: %s", request.url, e)
    return Response(content=str(e), status_code=status.HTTP_400_BAD_REQUEST, media_type="text/plain")


def _generate(seed, width, height):
    if seed is None:
        seed = random.randrange(2 ** 32)
    if width is None:
        width = app.state.width
    if height is None:
        height = app.state.height
    app.state.config.check_fits(width, height)

    log.info("generating %dx%d dungeon with seed %s", width, height, seed)
    grid, start = procgen.generate(width, height, app.state.config, random.Random(seed))
    return grid, start, seed


@app.get("/")
async def get_root():
    return {
        "status": "ok",
        "width": app.state.width,
        "height": app.state.height,
        "config": dataclasses.asdict(app.state.config),
    }


@app.get("/dungeon")
def get_dungeon(seed: Optional[int] = None, width: Optional[int] = None, height: Optional[int] = None):
    grid, start, seed = _generate(seed, width, height)
    return Response(
        content=export.pack(grid, start),
        media_type="application/x-msgpack",
        headers={SEED_HEADER: str(seed)},
    )


@app.get("/dungeon.png")
def get_dungeon_png(seed: Optional[int] = None, width: Optional[int] = None, height: Optional[int] = None):
    grid, start, seed = _generate(seed, width, height)
    return Response(
        content=export.render_png(grid, [spawn_player(start)]),
        media_type="image/png",
        headers={SEED_HEADER: str(seed)},
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
