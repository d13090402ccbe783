from decimal import Decimal
from sqlalchemy import String, Integer, DateTime, Numeric, Enum, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime, timezone
from travelvibe.db.base import Base

class Booking(Base):
    __tablename__ = "bookings"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(36), ForeignKey("users.id", ondelete="CASCADE"), index=True)

    type: Mapped[str] = mapped_column(Enum("CAR", "FLIGHT", "HOTEL", name="booking_type"))
    item_id: Mapped[int] = mapped_column(Integer)  # catalog row id; not checked against the catalog
    num_persons: Mapped[int] = mapped_column(Integer, default=1)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2))

    booking_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    status: Mapped[str] = mapped_column(Enum("CONFIRMED", "CANCELLED", "PENDING", name="booking_status"), default="PENDING")
