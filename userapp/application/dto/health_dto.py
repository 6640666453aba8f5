"""
Health DTO
==========

Pydantic models for service status responses.
"""
from typing import List
from pydantic import BaseModel, Field


class RootResponse(BaseModel):
    """DTO for the root endpoint."""
    status: str
    service: str
    version: str
    docs: str


class HealthResponse(BaseModel):
    """DTO for the health endpoint."""
    status: str = Field(..., description="'healthy' when the container is running")
    container_state: str = Field(..., description="Lifecycle state of the DI container")
    services: List[str] = Field(default_factory=list, description="Registered capability names")

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "healthy",
                "container_state": "running",
                "services": ["mongo_client", "UserRepository", "UserService"],
            }
        }
    }
