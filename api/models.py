"""Pydantic request/response models for the REST API."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


# --- Response Models ---

class OperationResponse(BaseModel):
    """Standard response for all composer endpoints."""
    success: bool
    tool: str
    result: Optional[Dict[str, Any]] = None
    error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    tools: List[str]


# --- Request Models ---

Policy = Literal["zero_start", "sequential"]


class ValidateRequest(BaseModel):
    document: Any = Field(..., description="VideoDefinition document (JSON object)")
    policy: Optional[Policy] = Field(None, description="Timing policy (default: configured)")
    strict: bool = False


class ComposeRequest(BaseModel):
    document: Any = Field(..., description="VideoDefinition document (JSON object)")
    policy: Optional[Policy] = None


class PlanRequest(BaseModel):
    script: str = Field(..., min_length=1, description="Natural-language script to plan")
    provider: Optional[str] = Field(None, description="LLM provider id or alias (default: configured)")
    model: Optional[str] = None
    api_key: Optional[str] = Field(None, description="Provider API key for this call only")


class RenderRequest(BaseModel):
    document: Any = Field(..., description="VideoDefinition document (JSON object)")
    policy: Optional[Policy] = None
    output_path: Optional[str] = Field(None, description="File name relative to the output directory")
