# backend/courtbook/routes/users.py
"""
User routes

Endpoints:
    GET /users                  → List users
    POST /users                 → Sign up (public, idempotent by email)
    PUT /users/{user_id}/role   → Change a user's role
    DELETE /users/{user_id}     → Delete a user
"""

from fastapi import APIRouter, Depends, Response, status

from ..auth import get_current_user
from ..schemas.common import DeletedResponse
from ..schemas.user import (
    UserCreate,
    UserListResponse,
    UserResponse,
    UserRoleUpdate,
    UserSignupResponse,
)
from ..services.dependencies import get_user_service
from ..services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=UserListResponse, dependencies=[Depends(get_current_user)])
def list_users(user_service: UserService = Depends(get_user_service)) -> UserListResponse:
    return UserListResponse(
        users=[UserResponse.model_validate(u) for u in user_service.list_users()]
    )


@router.post(
    "",
    response_model=UserSignupResponse,
    status_code=status.HTTP_201_CREATED,
    responses={200: {"description": "User already exists"}},
)
def signup(
    payload: UserCreate,
    response: Response,
    user_service: UserService = Depends(get_user_service),
) -> UserSignupResponse:
    user, created = user_service.signup(name=payload.name, email=payload.email)
    if not created:
        response.status_code = status.HTTP_200_OK
    return UserSignupResponse(
        message="User added" if created else "User already exists",
        id=user.id,
        user=UserResponse.model_validate(user),
    )


@router.put(
    "/{user_id}/role", response_model=UserResponse, dependencies=[Depends(get_current_user)]
)
def update_user_role(
    user_id: str,
    payload: UserRoleUpdate,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    return UserResponse.model_validate(user_service.set_role(user_id, payload.role))


@router.delete(
    "/{user_id}", response_model=DeletedResponse, dependencies=[Depends(get_current_user)]
)
def delete_user(
    user_id: str, user_service: UserService = Depends(get_user_service)
) -> DeletedResponse:
    user_service.delete_user(user_id)
    return DeletedResponse(message="User deleted", deleted_count=1)
