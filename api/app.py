"""
Video Composer REST API

FastAPI application exposing composer operations via HTTP endpoints.

Usage:
    video-composer-api                       (API_HOST / API_PORT)
    uvicorn api.app:app --reload --port 8000
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.config import APIConfig
from api.routers import compose, health, plan, render, validate
from composer import __version__
from composer.errors import PlanningError, RenderError, SchemaError
from composer.utils.logging_config import configure_logging

logger = logging.getLogger(__name__)

config = APIConfig.load()
configure_logging(level="debug" if config.debug else "info")

app = FastAPI(
    title="Video Composer API",
    description="REST API for planning, validating, composing and rendering data-driven videos.",
    version=__version__,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SchemaError)
async def schema_error_handler(request: Request, exc: SchemaError):
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid document", "detail": str(exc), **exc.to_dict()},
    )


@app.exception_handler(PlanningError)
async def planning_error_handler(request: Request, exc: PlanningError):
    logger.warning(f"Planning failed: {exc}")
    return JSONResponse(
        status_code=502,
        content={"error": "Planning failed", "detail": str(exc), "hint": exc.hint},
    )


@app.exception_handler(RenderError)
async def render_error_handler(request: Request, exc: RenderError):
    logger.error(f"Render failed: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "Render failed", "detail": str(exc), "hint": exc.hint, "stderr": exc.stderr},
    )


# Register routers under /api/v1 prefix
PREFIX = "/api/v1"
app.include_router(health.router, prefix=PREFIX, tags=["Health"])
app.include_router(validate.router, prefix=PREFIX, tags=["Composer"])
app.include_router(compose.router, prefix=PREFIX, tags=["Composer"])
app.include_router(plan.router, prefix=PREFIX, tags=["Composer"])
app.include_router(render.router, prefix=PREFIX, tags=["Composer"])


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Video Composer API",
        "version": __version__,
        "docs": "/docs",
        "health": "/api/v1/health",
    }


def serve() -> None:
    """Run the API with uvicorn on API_HOST:API_PORT."""
    import uvicorn

    uvicorn.run(app, host=config.host, port=config.port, log_level="debug" if config.debug else "info")
