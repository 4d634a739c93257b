# backend/courtbook/routes/coupons.py
"""
Coupon routes

Endpoints:
    GET /coupons                → List coupons (public, ``code`` substring filter)
    POST /coupons/validate      → Validate a coupon code (public)
    POST /coupons               → Add a coupon
    PUT /coupons/{coupon_id}    → Update a coupon
    DELETE /coupons/{coupon_id} → Delete a coupon
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from ..auth import get_current_user
from ..schemas.common import DeletedResponse
from ..schemas.coupon import (
    CouponCreate,
    CouponListResponse,
    CouponResponse,
    CouponUpdate,
    CouponValidateRequest,
    CouponValidateResponse,
)
from ..services.coupon_service import CouponService
from ..services.dependencies import get_coupon_service

router = APIRouter(prefix="/coupons", tags=["coupons"])


@router.get("", response_model=CouponListResponse)
def list_coupons(
    code: Optional[str] = Query(default=None),
    coupon_service: CouponService = Depends(get_coupon_service),
) -> CouponListResponse:
    coupons = coupon_service.list_coupons(code)
    return CouponListResponse(coupons=[CouponResponse.model_validate(c) for c in coupons])


@router.post("/validate", response_model=CouponValidateResponse)
def validate_coupon(
    payload: CouponValidateRequest,
    coupon_service: CouponService = Depends(get_coupon_service),
) -> CouponValidateResponse:
    return CouponValidateResponse(discount=coupon_service.validate(payload.code))


@router.post(
    "",
    response_model=CouponResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_user)],
)
def create_coupon(
    payload: CouponCreate, coupon_service: CouponService = Depends(get_coupon_service)
) -> CouponResponse:
    coupon = coupon_service.create_coupon(
        code=payload.code, discount=payload.discount, status=payload.status
    )
    return CouponResponse.model_validate(coupon)


@router.put(
    "/{coupon_id}", response_model=CouponResponse, dependencies=[Depends(get_current_user)]
)
def update_coupon(
    coupon_id: str,
    payload: CouponUpdate,
    coupon_service: CouponService = Depends(get_coupon_service),
) -> CouponResponse:
    coupon = coupon_service.update_coupon(
        coupon_id, code=payload.code, discount=payload.discount, status=payload.status
    )
    return CouponResponse.model_validate(coupon)


@router.delete(
    "/{coupon_id}", response_model=DeletedResponse, dependencies=[Depends(get_current_user)]
)
def delete_coupon(
    coupon_id: str, coupon_service: CouponService = Depends(get_coupon_service)
) -> DeletedResponse:
    coupon_service.delete_coupon(coupon_id)
    return DeletedResponse(message="Coupon deleted", deleted_count=1)
