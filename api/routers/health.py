"""Health and info endpoints."""

from fastapi import APIRouter

from api.models import HealthResponse
from composer import __version__
from composer.schema import json_schema

router = APIRouter()

TOOLS = ["validate", "compose", "plan", "render"]


@router.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse(status="ok", version=__version__, tools=TOOLS)


@router.get("/version")
async def version():
    """Return API version."""
    return {"version": __version__}


@router.get("/schema")
async def schema():
    """JSON Schema of VideoDefinition documents."""
    return json_schema()
