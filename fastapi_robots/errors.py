"""
Setup-time errors.

Nothing here is raised while serving requests; the route handler is
infallible once installed.
"""

from typing import Optional


class ConfigurationError(Exception):
    """The robots.txt payload could not be resolved from the configuration."""

    def __init__(self, message: str, path: Optional[str] = None, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.path = path
        self.cause = cause
