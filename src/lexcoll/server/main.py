"""
LexCollocations API Server.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from lexcoll.config import get_settings
from lexcoll.server.routes import generate, words


VERSION = "0.1.0"


logger = logging.getLogger(__name__)


def route_table(app: FastAPI) -> list[tuple[str, str, str]]:
    """(methods, path, name) for every API route, sorted by path."""
    routes = []
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ", ".join(sorted(route.methods - {"HEAD", "OPTIONS"}))
            routes.append((methods, route.path, route.name))
    return sorted(routes, key=lambda r: (r[1], r[0]))


def log_routes(app: FastAPI):
    lines = [f"  {methods:8} {path:40} -> {name}" for methods, path, name in route_table(app)]
    logger.info("%d API routes\n%s", len(lines), "\n".join(lines))


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    if not settings.gemini_api_key:
        logger.warning(
            "GOOGLE_GEMINI_API_KEY not set; /api/generate will answer 500"
        )
    log_routes(app)
    yield


app = FastAPI(title="LexCollocations API", version=VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(generate.router)
app.include_router(words.router)


@app.get("/")
async def root():
    return {"name": "LexCollocations API", "version": VERSION}
