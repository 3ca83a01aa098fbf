"""
robots.txt configuration.

Every tunable value lives here as a typed, documented field.
Any field can be overridden at runtime via an environment variable with the
`ROBOTS_` prefix (case-insensitive), e.g.:

    ROBOTS_MAX_AGE=3600 uvicorn fastapi_robots.main:app
    export ROBOTS_FILEPATH=./static/robots.txt

A `.env` file at the project root is loaded automatically.
Keyword arguments passed to `RobotsConfig(...)` win over the environment.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PAYLOAD = "User-agent: *\nAllow: /\n"


class RobotsConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ROBOTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,   # ROBOTS_MAX_AGE == robots_max_age
        extra="ignore",         # silently drop unknown keys
        frozen=True,
    )

    # ------------------------------------------------------------------ #
    # Payload source                                                      #
    # ------------------------------------------------------------------ #
    filepath: Optional[str] = Field(
        None, description="Text file served instead of the default body"
    )
    encoding: str = Field(
        "utf8", description="Text encoding used to read `filepath`"
    )

    # ------------------------------------------------------------------ #
    # Response                                                            #
    # ------------------------------------------------------------------ #
    max_age: int = Field(
        86_400, description="24 h — Cache-Control max-age (seconds), used verbatim"
    )
    include_in_schema: bool = Field(
        True, description="List GET /robots.txt in the OpenAPI document"
    )
