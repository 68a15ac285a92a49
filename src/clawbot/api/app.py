"""
Core API backend for Clawbot.

It exposes the following endpoints:
- **GET /health**  - liveness probe for health checks.
- **GET /tools**   - list the registered canned tools and their triggering intents.
- **POST /chat**   - build one agent turn: {"messages": [{"role": "...", "content": "..."}, ...]}
"""

import logging

from fastapi import (
    FastAPI,
    Request,
)
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from clawbot.agent.agent_loop import SyntheticAgent
from clawbot.api.models import (
    ChatRequest,
    ErrorResponse,
    ToolCatalogResponse,
)
from clawbot.common import (
    AnsiColors,
    colored_print,
)
from clawbot.config import settings
from clawbot.tools import get_tool_catalog

logger = logging.getLogger(__name__)

AGENT_FAILURE = "Agent failed to generate a response."

agent = SyntheticAgent()

app = FastAPI(title="Clawbot API", version="0.1.0", description="Scripted Clawbot chat responder")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------
def _failure() -> JSONResponse:
    return JSONResponse(status_code=500, content=ErrorResponse(error=AGENT_FAILURE).model_dump())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Invalid payloads get the same opaque failure as pipeline errors."""
    logger.warning("Rejected chat payload: %s", exc.errors())
    return _failure()


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
@app.get("/health", summary="Health check")
async def health() -> dict[str, str]:
    """Return a simple liveness payload."""
    return {"status": "ok"}


@app.get("/tools", response_model=ToolCatalogResponse, summary="List registered tools")
async def list_tools() -> ToolCatalogResponse:
    """Describe the canned tools the agent can attach to a reply."""
    return ToolCatalogResponse(tools=dict(get_tool_catalog()))


@app.post("/chat", summary="Build an agent turn", responses={500: {"model": ErrorResponse}})
def chat_endpoint(req: ChatRequest) -> JSONResponse:
    """Run the agent over the supplied history and return the resulting turn."""
    try:
        history = [entry.to_message() for entry in req.messages]
        turn = agent.process(history)
    except Exception:  # pylint: disable=broad-except
        logger.exception("Agent error")
        return _failure()

    return JSONResponse(content=turn.model_dump(mode="json", by_alias=True, exclude_none=True))


# ---------------------------------------------------------------------------
# Public helper to launch the API (imported by main.py)
# ---------------------------------------------------------------------------
def run_api(
    host: str = "0.0.0.0", port: int = 8000, reload: bool = False, log_level: str | None = None
) -> None:
    """Start a uvicorn server hosting *app*.

    Parameters
    ----------
    host, port:
        Bind address for the HTTP server.
    reload:
        If *True*, enable auto-reload (useful in development).
    log_level:
        Logging level to use (default from settings if not provided).
    """

    # Lazy import - keeps uvicorn an optional dependency at pkg‑import time
    import uvicorn  # pylint: disable=import-outside-toplevel

    if log_level is None:  # Use the default from settings if not provided
        log_level = settings.LOG_LEVEL

    logger.info(
        "Starting Clawbot API at %s:%d (reload=%s, log_level=%s)", host, port, reload, log_level
    )
    logger.debug("API settings: %s", settings.model_dump())

    colored_print(f"🦀 Clawbot API is running at http://localhost:{port}.", AnsiColors.GREEN)
    colored_print(f"Visit http://localhost:{port}/docs for API documentation.", AnsiColors.BLUE)
    uvicorn.run(
        "clawbot.api.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )


# ---------------------------------------------------------------------------
# `python -m clawbot.api.app` helper
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    run_api(reload=True)
