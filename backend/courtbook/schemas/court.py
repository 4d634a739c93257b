from decimal import Decimal
from typing import Any, List, Optional

from pydantic import Field, field_serializer

from ._strict_base import RequestModel, StrictModel


class CourtCreate(RequestModel):
    name: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    price: Optional[Any] = None
    image: Optional[str] = None
    # A list of labels or a comma separated string
    available_slots: Optional[Any] = Field(default=None, alias="availableSlots")


class CourtUpdate(CourtCreate):
    pass


class CourtResponse(StrictModel):
    id: str
    name: str
    type: str
    status: str
    price: Decimal
    image: str
    available_slots: List[str] = Field(alias="availableSlots")

    @field_serializer("price")
    def _price_as_float(self, value: Decimal) -> float:
        return float(value)


class CourtListResponse(StrictModel):
    courts: List[CourtResponse]
