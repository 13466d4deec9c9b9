from pydantic import BaseModel
from typing import Any, Generic, List, Literal, Optional, TypeVar

T = TypeVar('T')

class SuccessResponse(BaseModel, Generic[T]):
    success: Literal[True] = True
    message: str
    data: T

class FieldViolation(BaseModel):
    field: str
    message: str
    code: str
    expected: Optional[str] = None
    received: Optional[str] = None

class ErrorResponse(BaseModel):
    success: Literal[False] = False
    message: str
    error: Optional[str] = None
    details: Optional[List[Any]] = None

class HealthResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    uptime: float
