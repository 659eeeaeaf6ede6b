"""FastAPI application for dry-running the swap router."""

import os

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from swap_router import __version__
from swap_router.api.endpoints import router
from swap_router.api.schemas import ErrorResponse
from swap_router.errors import RouterError

logger = structlog.get_logger()

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("ROUTER_HOST", "0.0.0.0")
PORT = int(os.environ.get("ROUTER_PORT", "8000"))
DEBUG = os.environ.get("ROUTER_DEBUG", "false").lower() in ("true", "1", "yes")

app = FastAPI(
    title="Swap Router",
    description="Dry-run swap legs and multi-hop routes against a chain snapshot",
    version=__version__,
)

app.include_router(router)


@app.exception_handler(RouterError)
async def router_error_handler(request: Request, exc: RouterError) -> JSONResponse:
    """Report router errors as 400 with their error code."""
    logger.warning(
        "router_error",
        path=request.url.path,
        error=exc.code,
        detail=str(exc),
    )
    body = ErrorResponse(error=exc.code, detail=str(exc))
    return JSONResponse(status_code=400, content=body.model_dump())


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def run() -> None:
    """Run the API server.

    Configuration via environment variables:
    - ROUTER_HOST: Host to bind to (default: 0.0.0.0)
    - ROUTER_PORT: Port to bind to (default: 8000)
    - ROUTER_DEBUG: Enable debug/reload mode (default: false)
    """
    uvicorn.run(
        "swap_router.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
