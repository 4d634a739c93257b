# backend/courtbook/services/coupon_service.py
"""
Coupon Service for the Courtbook API

Coupon administration and the public coupon validator. Codes are unique
across all coupons; only active coupons validate.
"""

import logging
from decimal import Decimal
from typing import Any, List, Optional

from sqlalchemy.orm import Session

from ..core.enums import CouponStatus
from ..core.exceptions import DuplicateCodeException, NotFoundException, ValidationException
from ..models.coupon import Coupon
from ..repositories.factory import RepositoryFactory
from ..utils.parsing import parse_decimal
from .base import BaseService

logger = logging.getLogger(__name__)

VALID_COUPON_STATUSES = frozenset(s.value for s in CouponStatus)


class CouponService(BaseService):
    def __init__(self, db: Session):
        super().__init__(db)
        self.repository = RepositoryFactory.create_base_repository(db, Coupon)

    @BaseService.measure_operation("validate_coupon")
    def validate(self, code: Optional[str]) -> Decimal:
        """
        Return the discount of the active coupon with ``code``.

        Raises:
            ValidationException: If no code is given
            NotFoundException: If no active coupon has that code
        """
        if not code:
            raise ValidationException("Coupon code is required", code="MISSING_COUPON_CODE")

        coupon = self.repository.find_one_by(code=code, status=CouponStatus.ACTIVE.value)
        if not coupon:
            raise NotFoundException("Invalid or expired coupon code", code="COUPON_NOT_FOUND")
        return coupon.discount

    def list_coupons(self, code: Optional[str] = None) -> List[Coupon]:
        return self.repository.search("code", code)

    @BaseService.measure_operation("create_coupon")
    def create_coupon(self, *, code: Any, discount: Any, status: Any = None) -> Coupon:
        if not code or discount in (None, ""):
            raise ValidationException("Code and discount are required", code="MISSING_FIELDS")
        amount = self._parse_discount(discount)
        status = status or CouponStatus.ACTIVE.value
        self._check_status(status)

        with self.transaction():
            if self.repository.find_one_by(code=code):
                raise DuplicateCodeException(code)
            coupon = self.repository.create(code=code, discount=amount, status=status)

        self.logger.info(f"Created coupon {coupon.code}")
        return coupon

    @BaseService.measure_operation("update_coupon")
    def update_coupon(
        self,
        coupon_id: str,
        *,
        code: Any = None,
        discount: Any = None,
        status: Any = None,
    ) -> Coupon:
        updates = {}
        if code:
            updates["code"] = code
        if discount not in (None, ""):
            updates["discount"] = self._parse_discount(discount)
        if status:
            self._check_status(status)
            updates["status"] = status

        with self.transaction():
            coupon = self.repository.get_by_id(coupon_id)
            if not coupon:
                raise NotFoundException("Coupon not found", code="COUPON_NOT_FOUND")
            if code:
                clash = self.repository.find_one_by(code=code)
                if clash and clash.id != coupon.id:
                    raise DuplicateCodeException(code)
            self.repository.update(coupon_id, **updates)

        return coupon

    @BaseService.measure_operation("delete_coupon")
    def delete_coupon(self, coupon_id: str) -> None:
        with self.transaction():
            deleted = self.repository.delete(coupon_id)
        if not deleted:
            raise NotFoundException("Coupon not found", code="COUPON_NOT_FOUND")

    @staticmethod
    def _parse_discount(value: Any) -> Decimal:
        amount = parse_decimal(value)
        if amount is None or amount <= 0:
            raise ValidationException("Discount must be a positive number", code="INVALID_DISCOUNT")
        return amount

    @staticmethod
    def _check_status(status: Any) -> None:
        if status not in VALID_COUPON_STATUSES:
            raise ValidationException("Invalid status", code="INVALID_STATUS", details={"status": status})
