from datetime import datetime
from typing import List, Optional

from pydantic import Field

from ._strict_base import RequestModel, StrictModel


class UserCreate(RequestModel):
    name: Optional[str] = None
    email: Optional[str] = None


class UserRoleUpdate(RequestModel):
    role: Optional[str] = None


class UserResponse(StrictModel):
    id: str
    email: str
    name: str
    role: str
    created_at: datetime = Field(alias="createdAt")


class UserSignupResponse(StrictModel):
    message: str
    id: str
    user: UserResponse


class UserListResponse(StrictModel):
    users: List[UserResponse]
