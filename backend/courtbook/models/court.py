"""Court model: a bookable resource with its advertised slot labels."""

from decimal import Decimal
from typing import List

from sqlalchemy import JSON, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from ..core.enums import CourtStatus
from ..database import Base
from .types import new_id


class Court(Base):
    __tablename__ = "courts"

    id: Mapped[str] = mapped_column(String(26), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(100), nullable=False)
    status: Mapped[str] = mapped_column(
        String(50), nullable=False, default=CourtStatus.AVAILABLE.value
    )
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    image: Mapped[str] = mapped_column(String(1024), nullable=False)
    # Slot labels are advertised only; bookings do not consume them
    available_slots: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<Court(id={self.id}, name={self.name}, status={self.status})>"
