"""Start the example server with env-based configuration.

Before Uvicorn binds a socket, the matcher configuration
(`NAME_SUGGEST_KERNEL`, `NAME_SUGGEST_THRESHOLD_*`) is validated so a typo in
`.env` fails here with a readable message instead of inside the lifespan hook.

Listening address and logging:
- `NAME_SUGGEST_API_HOST` (default: 127.0.0.1)
- `NAME_SUGGEST_API_PORT` (default: 8000)
- `NAME_SUGGEST_LOG_LEVEL` (default: INFO)

Usage
-----
python examples/api_server_fastapi/run.py
"""

from __future__ import annotations

import os

import uvicorn

# Importing `main` loads `.env` early (see main.py).
from main import app, build_matcher_from_env  # type: ignore  # noqa: E402

from name_suggest.logconfig import setup_logging
from name_suggest.threshold import get_env_int


def listen_address() -> tuple[str, int]:
    host = os.getenv("NAME_SUGGEST_API_HOST", "").strip() or "127.0.0.1"
    try:
        port = get_env_int("NAME_SUGGEST_API_PORT", 8000)
    except ValueError as e:
        raise RuntimeError(str(e)) from e
    if not (1 <= port <= 65535):
        raise RuntimeError(f"NAME_SUGGEST_API_PORT must be in range [1, 65535], got {port}")
    return host, port


def serve() -> None:
    logger = setup_logging(os.getenv("NAME_SUGGEST_LOG_LEVEL", "INFO"))
    matcher = build_matcher_from_env()
    host, port = listen_address()
    logger.info("Serving %r on %s:%d", matcher, host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    serve()
