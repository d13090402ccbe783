from decimal import Decimal
from sqlalchemy import String, Integer, DateTime, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime, timezone
from travelvibe.db.base import Base

class Car(Base):
    __tablename__ = "cars"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    model: Mapped[str] = mapped_column(String(255))
    brand: Mapped[str] = mapped_column(String(255))
    location: Mapped[str] = mapped_column(String(255), index=True)
    price_per_day: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    car_type: Mapped[str] = mapped_column(String(50))  # Sedan, SUV, Sports, Electric
    description: Mapped[str] = mapped_column(Text, nullable=True)
    seating_capacity: Mapped[int] = mapped_column(Integer)
    available_cars: Mapped[int] = mapped_column(Integer)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
