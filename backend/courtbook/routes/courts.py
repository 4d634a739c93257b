# backend/courtbook/routes/courts.py
"""
Court routes

Endpoints:
    GET /courts               → List courts (public)
    POST /courts              → Add a court
    PUT /courts/{court_id}    → Update a court
    DELETE /courts/{court_id} → Delete a court
"""

from fastapi import APIRouter, Depends, status

from ..auth import get_current_user
from ..schemas.common import DeletedResponse
from ..schemas.court import CourtCreate, CourtListResponse, CourtResponse, CourtUpdate
from ..services.court_service import CourtService
from ..services.dependencies import get_court_service

router = APIRouter(prefix="/courts", tags=["courts"])


@router.get("", response_model=CourtListResponse)
def list_courts(court_service: CourtService = Depends(get_court_service)) -> CourtListResponse:
    courts = court_service.list_courts()
    return CourtListResponse(courts=[CourtResponse.model_validate(c) for c in courts])


@router.post(
    "",
    response_model=CourtResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_user)],
)
def create_court(
    payload: CourtCreate, court_service: CourtService = Depends(get_court_service)
) -> CourtResponse:
    court = court_service.create_court(
        name=payload.name,
        type=payload.type,
        status=payload.status,
        price=payload.price,
        image=payload.image,
        available_slots=payload.available_slots,
    )
    return CourtResponse.model_validate(court)


@router.put("/{court_id}", response_model=CourtResponse, dependencies=[Depends(get_current_user)])
def update_court(
    court_id: str,
    payload: CourtUpdate,
    court_service: CourtService = Depends(get_court_service),
) -> CourtResponse:
    court = court_service.update_court(
        court_id,
        name=payload.name,
        type=payload.type,
        status=payload.status,
        price=payload.price,
        image=payload.image,
        available_slots=payload.available_slots,
    )
    return CourtResponse.model_validate(court)


@router.delete(
    "/{court_id}", response_model=DeletedResponse, dependencies=[Depends(get_current_user)]
)
def delete_court(
    court_id: str, court_service: CourtService = Depends(get_court_service)
) -> DeletedResponse:
    court_service.delete_court(court_id)
    return DeletedResponse(message="Court deleted", deleted_count=1)
