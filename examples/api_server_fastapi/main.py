"""Example FastAPI server for `name-suggest`.

Goals
-----
- Expose "did you mean?" over HTTP for non-Python callers
- Build the Matcher once at startup (do NOT rebuild per request)
- Same outcomes as the CLI: exact hit, suggestion, or nothing

Endpoints
---------
POST /suggest
Request JSON:
    {"input": "instakk", "values": ["update", "install"], "distance": null}
    {"input": "colr", "values": {"color": "red"}, "mode": "keys"}
Response JSON:
    {"input": "instakk", "suggestion": "install", "exact": false}

GET /health
    {"status": "ok"}

Optional environment variables
------------------------------
- NAME_SUGGEST_KERNEL (default: python; or rapidfuzz)
- NAME_SUGGEST_THRESHOLD_FLOOR (default: 3)
- NAME_SUGGEST_THRESHOLD_DIVISOR (default: 3)

Run (example)
-------------
1) Install dependencies:
   pip install -e ".[api]"

2) Start server:
   uvicorn examples.api_server_fastapi.main:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Literal

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from name_suggest import Matcher, ThresholdPolicy
from name_suggest.adapters import candidates_of, keys_of

logger = logging.getLogger("name_suggest.api")


class SuggestRequest(BaseModel):
    """Request payload for POST /suggest."""

    input: str = Field(..., description="Input to check if a similar name exists.")
    values: list[str] | dict[str, str] = Field(
        ..., description="Valid values (a list, or an object for key/value pools)."
    )
    distance: int | None = Field(
        default=None, ge=0, description="Maximum distance; derived from input if omitted."
    )
    mode: Literal["values", "keys"] = "values"


class SuggestResponse(BaseModel):
    """Response payload for POST /suggest."""

    input: str
    suggestion: str | None
    exact: bool


def _load_dotenv_if_present() -> None:
    """Load a local `.env` file if present.

    Behavior:
    - If `NAME_SUGGEST_ENV_FILE` is set, load that file.
    - Otherwise try `.env` in the current working directory.

    Real environment variables always win; `.env` only fills missing ones.
    """

    def parse_line(line: str) -> tuple[str, str] | None:
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            return None
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if (
            value.startswith(('"', "'"))
            and value.endswith(('"', "'"))
            and len(value) >= 2
        ):
            value = value[1:-1]
        if not key:
            return None
        return key, value

    explicit = os.getenv("NAME_SUGGEST_ENV_FILE")
    env_path = Path(explicit).expanduser() if explicit else Path.cwd() / ".env"
    if not env_path.is_file():
        return

    for raw in env_path.read_text(encoding="utf-8").splitlines():
        parsed = parse_line(raw)
        if parsed is None:
            continue
        key, value = parsed
        os.environ.setdefault(key, value)


_load_dotenv_if_present()


class _AppState:
    """Holds long-lived objects shared across requests."""

    def __init__(self) -> None:
        self.matcher: Matcher | None = None


STATE = _AppState()


def build_matcher_from_env() -> Matcher:
    """Read server configuration from the environment."""
    kernel = os.getenv("NAME_SUGGEST_KERNEL", "python").strip() or "python"
    try:
        return Matcher(policy=ThresholdPolicy.from_env(), kernel=kernel)
    except ValueError as e:
        raise RuntimeError(f"Invalid name-suggest configuration: {e}") from e


@asynccontextmanager
async def lifespan(app: FastAPI):
    STATE.matcher = build_matcher_from_env()
    logger.info("Matcher ready: %r", STATE.matcher)
    yield
    STATE.matcher = None


app = FastAPI(title="Name Suggest API", version="0.1.0", lifespan=lifespan)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/suggest", response_model=SuggestResponse)
def suggest(req: SuggestRequest) -> SuggestResponse:
    """Return the most similar value (or key) for the input."""
    if STATE.matcher is None:
        raise HTTPException(status_code=503, detail="Server is still starting up")

    if req.mode == "keys":
        if not isinstance(req.values, dict):
            raise HTTPException(status_code=400, detail="mode=keys requires an object")
        pool = list(keys_of(req.values))
    else:
        pool = list(candidates_of(req.values))

    if req.input in pool:
        return SuggestResponse(input=req.input, suggestion=None, exact=True)

    try:
        suggestion = STATE.matcher.find_best_match(req.input, pool, req.distance)
    except (TypeError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    return SuggestResponse(input=req.input, suggestion=suggestion, exact=False)
