# health_care/schemas/app_schemas.py

from pydantic import BaseModel
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

class ApiResponse(BaseModel, Generic[T]):
    status: int
    message: str
    data: T

class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: Optional[Any] = None
