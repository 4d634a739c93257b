# backend/courtbook/services/court_service.py
"""Court administration. Slot labels are advertised only and never consumed."""

from decimal import Decimal
from typing import Any, List

from sqlalchemy.orm import Session

from ..core.enums import CourtStatus
from ..core.exceptions import NotFoundException, ValidationException
from ..models.court import Court
from ..repositories.factory import RepositoryFactory
from ..utils.parsing import parse_decimal, split_slots
from .base import BaseService


class CourtService(BaseService):
    def __init__(self, db: Session):
        super().__init__(db)
        self.repository = RepositoryFactory.create_base_repository(db, Court)

    def list_courts(self) -> List[Court]:
        return self.repository.get_all()

    @BaseService.measure_operation("create_court")
    def create_court(
        self,
        *,
        name: Any,
        type: Any,
        price: Any,
        image: Any,
        available_slots: Any,
        status: Any = None,
    ) -> Court:
        if not name or not type or price in (None, "") or not image or not available_slots:
            raise ValidationException("All fields required", code="MISSING_FIELDS")

        with self.transaction():
            court = self.repository.create(
                name=name,
                type=type,
                status=status or CourtStatus.AVAILABLE.value,
                price=self._parse_price(price),
                image=image,
                available_slots=split_slots(available_slots),
            )
        self.logger.info(f"Created court {court.id} ({court.name})")
        return court

    @BaseService.measure_operation("update_court")
    def update_court(self, court_id: str, **fields: Any) -> Court:
        """Apply the non-empty fields; empty values leave the stored value unchanged."""
        updates = {key: value for key, value in fields.items() if value not in (None, "", [])}
        if "price" in updates:
            updates["price"] = self._parse_price(updates["price"])
        if "available_slots" in updates:
            updates["available_slots"] = split_slots(updates["available_slots"])

        with self.transaction():
            court = self.repository.update(court_id, **updates)
            if not court:
                raise NotFoundException("Court not found", code="COURT_NOT_FOUND")
        return court

    @BaseService.measure_operation("delete_court")
    def delete_court(self, court_id: str) -> None:
        with self.transaction():
            deleted = self.repository.delete(court_id)
        if not deleted:
            raise NotFoundException("Court not found", code="COURT_NOT_FOUND")

    @staticmethod
    def _parse_price(value: Any) -> Decimal:
        price = parse_decimal(value)
        if price is None or price <= 0:
            raise ValidationException("Price must be a positive number", code="INVALID_PRICE")
        return price
