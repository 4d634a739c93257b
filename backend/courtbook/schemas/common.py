from typing import Optional

from pydantic import Field

from ._strict_base import RequestModel, StrictModel


class MessageResponse(StrictModel):
    message: str


class DeletedResponse(StrictModel):
    message: str
    deleted_count: int = Field(default=1, alias="deletedCount")


class SessionRequest(RequestModel):
    email: Optional[str] = None


class SessionResponse(StrictModel):
    message: str = "Token sent"
    status: bool = True


class SuccessResponse(StrictModel):
    success: bool = True


class HealthResponse(StrictModel):
    status: str
    environment: str
