from datetime import datetime
from decimal import Decimal
from typing import Any, List, Optional

from pydantic import Field, field_serializer

from ._strict_base import RequestModel, StrictModel


class CouponCreate(RequestModel):
    code: Optional[str] = None
    discount: Optional[Any] = None
    status: Optional[str] = None


class CouponUpdate(CouponCreate):
    pass


class CouponValidateRequest(RequestModel):
    code: Optional[str] = None


class CouponValidateResponse(StrictModel):
    message: str = "Coupon applied successfully"
    discount: Decimal

    @field_serializer("discount")
    def _discount_as_float(self, value: Decimal) -> float:
        return float(value)


class CouponResponse(StrictModel):
    id: str
    code: str
    discount: Decimal
    status: str
    created_at: datetime = Field(alias="createdAt")

    @field_serializer("discount")
    def _discount_as_float(self, value: Decimal) -> float:
        return float(value)


class CouponListResponse(StrictModel):
    coupons: List[CouponResponse]
