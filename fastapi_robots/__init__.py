"""
Serve robots.txt from a FastAPI app.

    app = FastAPI(lifespan=lifespan)

    @asynccontextmanager
    async def lifespan(app):
        await register_robots(app, RobotsConfig(filepath="static/robots.txt"))
        yield

`register_robots` resolves the payload first and only then installs the route,
so a ConfigurationError aborts startup with nothing registered.
"""

import logging
from typing import Mapping, Optional, Union

from fastapi import FastAPI

from fastapi_robots.api.robots import create_robots_router
from fastapi_robots.config import DEFAULT_PAYLOAD, RobotsConfig
from fastapi_robots.core.loader import resolve_payload
from fastapi_robots.errors import ConfigurationError

__all__ = [
    "DEFAULT_PAYLOAD",
    "ConfigurationError",
    "RobotsConfig",
    "create_robots_router",
    "register_robots",
    "resolve_payload",
]

logger = logging.getLogger(__name__)


def _as_config(config: Union[RobotsConfig, Mapping, None]) -> RobotsConfig:
    if config is None:
        return RobotsConfig()
    if isinstance(config, RobotsConfig):
        return config
    options = dict(config)
    if "maxAge" in options:
        options["max_age"] = options.pop("maxAge")
    return RobotsConfig(**options)


async def register_robots(app: FastAPI, config: Optional[Union[RobotsConfig, Mapping]] = None) -> None:
    """
    Install GET /robots.txt on `app`.

    `config` may be a RobotsConfig, a plain mapping of its fields (`maxAge`
    is accepted for `max_age`), or None for defaults plus environment.
    Raises ConfigurationError if the configured file cannot be loaded; the
    route is not installed in that case.
    """
    config = _as_config(config)
    payload = await resolve_payload(config)

    app.include_router(
        create_robots_router(payload, config.max_age, include_in_schema=config.include_in_schema)
    )
    source = config.filepath or "built-in default"
    logger.info(f"[STARTUP] robots.txt route installed (source: {source}, max-age: {config.max_age})")
