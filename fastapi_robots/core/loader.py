"""
Payload resolution for GET /robots.txt.

The payload is resolved exactly once, at setup. The file read runs in the
threadpool so it never blocks the event loop, and nothing here is touched
again once the route is installed.

Besides the Python codec names, the aliases `ucs2` / `utf16le` / `binary`
and the binary-to-text forms `base64`, `base64url` and `hex` are understood.
The latter render the file's raw bytes as text and are served as-is.
"""

import base64
import binascii
import errno
import logging
import os

from fastapi.concurrency import run_in_threadpool

from fastapi_robots.config import DEFAULT_PAYLOAD, RobotsConfig
from fastapi_robots.errors import ConfigurationError

logger = logging.getLogger(__name__)

PLUGIN_NAME = "fastapi-robots"
EMPTY_CONTENT_MESSAGE = "file content must be a non-empty string"

# Aliases missing from the codec registry
_ENCODING_ALIASES = {
    "ucs2": "utf-16-le",
    "ucs-2": "utf-16-le",
    "utf16le": "utf-16-le",
    "binary": "latin-1",
}

_BINARY_TO_TEXT = {
    "base64": lambda raw: base64.b64encode(raw).decode("ascii"),
    "base64url": lambda raw: base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii"),
    "hex": lambda raw: binascii.hexlify(raw).decode("ascii"),
}


class _EmptyContent(ValueError):
    pass


def decode_content(raw: bytes, encoding: str) -> str:
    """Turn raw file bytes into the served text using `encoding`."""
    name = encoding.strip().lower()

    if name in _BINARY_TO_TEXT:
        return _BINARY_TO_TEXT[name](raw)

    # bytes.decode raises LookupError for unknown and bytes-to-bytes codecs
    return raw.decode(_ENCODING_ALIASES.get(name, name))


def describe_error(err: BaseException) -> str:
    """Render the cause part of a load failure, e.g. `ENOENT: No such file or directory`."""
    if isinstance(err, OSError) and err.errno in errno.errorcode:
        return f"{errno.errorcode[err.errno]}: {err.strerror}"
    return str(err)


def read_payload_file(path: str, encoding: str) -> str:
    """Blocking read of the whole file; raises on empty content."""
    with open(path, "rb") as f:
        raw = f.read()

    text = decode_content(raw, encoding)
    if not text:
        raise _EmptyContent(EMPTY_CONTENT_MESSAGE)
    return text


async def resolve_payload(config: RobotsConfig) -> str:
    """
    Resolve the robots.txt body for `config`.

    Returns DEFAULT_PAYLOAD when no file is configured. Any failure to read,
    decode, or validate the file raises ConfigurationError naming the absolute
    path and the underlying cause. No retries.
    """
    if not config.filepath:
        return DEFAULT_PAYLOAD

    full_path = os.path.abspath(config.filepath)

    try:
        payload = await run_in_threadpool(read_payload_file, full_path, config.encoding)
    except (OSError, LookupError, ValueError) as e:
        message = f"{PLUGIN_NAME} cannot load the file {full_path}: {describe_error(e)}"
        logger.error(f"[ROBOTS] {message}")
        raise ConfigurationError(message, path=full_path, cause=e) from e

    logger.info(f"[ROBOTS] Loaded {len(payload)} chars from {full_path} ({config.encoding})")
    return payload
