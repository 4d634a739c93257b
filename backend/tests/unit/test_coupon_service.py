# backend/tests/unit/test_coupon_service.py
from decimal import Decimal

import pytest

from courtbook.core.exceptions import (
    DuplicateCodeException,
    NotFoundException,
    ValidationException,
)
from courtbook.services.coupon_service import CouponService


@pytest.fixture
def coupon_service(db):
    return CouponService(db)


class TestValidateCoupon:
    def test_active_coupon_returns_discount(self, coupon_service):
        coupon_service.create_coupon(code="SUMMER10", discount="10", status="active")

        assert coupon_service.validate("SUMMER10") == Decimal("10")

    def test_inactive_coupon_is_not_found(self, coupon_service):
        coupon_service.create_coupon(code="OLD5", discount="5", status="inactive")

        with pytest.raises(NotFoundException):
            coupon_service.validate("OLD5")

    def test_unknown_code_is_not_found(self, coupon_service):
        with pytest.raises(NotFoundException):
            coupon_service.validate("NOPE")

    @pytest.mark.parametrize("code", [None, ""])
    def test_empty_code_is_rejected(self, coupon_service, code):
        with pytest.raises(ValidationException):
            coupon_service.validate(code)


class TestCouponAdministration:
    def test_duplicate_code_is_rejected(self, coupon_service):
        coupon_service.create_coupon(code="DUP", discount="5")

        with pytest.raises(DuplicateCodeException):
            coupon_service.create_coupon(code="DUP", discount="7")

    def test_invalid_status_is_rejected(self, coupon_service):
        with pytest.raises(ValidationException):
            coupon_service.create_coupon(code="X1", discount="5", status="expired")

    def test_update_to_taken_code_is_rejected(self, coupon_service):
        coupon_service.create_coupon(code="A", discount="5")
        second = coupon_service.create_coupon(code="B", discount="5")

        with pytest.raises(DuplicateCodeException):
            coupon_service.update_coupon(second.id, code="A")

    def test_update_keeps_own_code(self, coupon_service):
        coupon = coupon_service.create_coupon(code="SAME", discount="5")

        updated = coupon_service.update_coupon(coupon.id, code="SAME", status="inactive")

        assert updated.status == "inactive"

    def test_list_filters_by_code_substring(self, coupon_service):
        coupon_service.create_coupon(code="SUMMER10", discount="10")
        coupon_service.create_coupon(code="WINTER5", discount="5")

        assert [c.code for c in coupon_service.list_coupons("summer")] == ["SUMMER10"]
        assert len(coupon_service.list_coupons()) == 2

    def test_delete_unknown_coupon(self, coupon_service, unknown_id):
        with pytest.raises(NotFoundException):
            coupon_service.delete_coupon(unknown_id)
