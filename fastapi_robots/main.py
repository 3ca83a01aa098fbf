import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI

# Load environment variables at the very beginning
load_dotenv()

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

from fastapi_robots import register_robots  # noqa: E402
from fastapi_robots.config import RobotsConfig  # noqa: E402


def create_app(config: Optional[RobotsConfig] = None) -> FastAPI:
    """Build the app; robots.txt is installed during startup, before any request is served."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events."""
        # A ConfigurationError here aborts startup
        await register_robots(app, config)
        logger.info("[STARTUP] Application ready")
        yield
        logger.info("[SHUTDOWN] Application stopped")

    app = FastAPI(title="robots.txt service", lifespan=lifespan)

    # ---- Healthcheck ----
    @app.get("/health", tags=["System"])
    async def health():
        return {"status": "healthy"}

    return app


# Configured from ROBOTS_* environment variables / .env
app = create_app()
