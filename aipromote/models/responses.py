"""Response envelopes shared by every route.

Success: ``{"success": true, "data": ...}`` or ``{"success": true, "message": ...}``.
Failure: ``{"success": false, "error": ..., "type": ..., "details": ...}``.
"""

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    success: Literal[True] = True
    data: T


class MessageResponse(BaseModel):
    success: Literal[True] = True
    message: str


class ErrorResponse(BaseModel):
    """Error envelope schema, referenced from the OpenAPI responses."""

    success: Literal[False] = False
    error: str
    type: str
    details: Any | None = None
