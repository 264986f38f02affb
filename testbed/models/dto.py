"""Data Transfer Objects - API contracts."""

from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class UserDTO(BaseModel):
    """User data for API responses."""
    id: int
    name: str
    email: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserCreateRequest(BaseModel):
    """Request to create a new user.

    Presence is checked by the service so that a missing field is answered
    with 400 like an empty one, not with a schema error.
    """
    name: str = ""
    email: str = ""


class UserUpdateRequest(BaseModel):
    """Partial user update. Omitted or empty fields keep their value."""
    name: Optional[str] = None
    email: Optional[str] = None


class ProductDTO(BaseModel):
    """Product data for API responses."""
    id: int
    name: str
    price: float
    stock: int

    model_config = ConfigDict(from_attributes=True)


class ProductCreateRequest(BaseModel):
    """Request to create a new product."""
    name: str = ""
    price: float = Field(0.0, strict=True, allow_inf_nan=False)
    stock: int = Field(0, strict=True)


class ProductUpdateRequest(BaseModel):
    """Partial product update.

    name is applied when non-empty, price when positive, stock when
    non-negative. Anything else leaves the stored value alone.
    """
    name: Optional[str] = None
    price: Optional[float] = Field(None, strict=True, allow_inf_nan=False)
    stock: Optional[int] = Field(None, strict=True)


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    code: int
    message: str


class HealthResponse(BaseModel):
    """Liveness probe response."""
    status: str
    timestamp: datetime
    version: str


class ReadinessResponse(BaseModel):
    """Readiness probe response."""
    ready: bool
    timestamp: datetime
    checks: Dict[str, bool] = Field(default_factory=dict)


class VersionResponse(BaseModel):
    """Build information."""
    version: str
    build_date: str
    runtime_version: str


class SlowResponse(BaseModel):
    """Response of the intentionally slow endpoint."""
    message: str
    delay: str


class RandomResponse(BaseModel):
    """Successful branch of the clock-parity endpoint."""
    success: bool
    random: int

