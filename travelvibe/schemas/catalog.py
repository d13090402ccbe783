from datetime import datetime, timezone
from pydantic import BaseModel, field_validator
from typing import Optional

class CarIn(BaseModel):
    model: str
    brand: str
    location: str
    price_per_day: float
    car_type: str
    description: Optional[str] = None
    seating_capacity: int
    available_cars: int

class FlightIn(BaseModel):
    airline: str
    flight_number: str
    origin: str
    destination: str
    departure_time: datetime
    arrival_time: datetime
    price: float
    available_seats: int

    @field_validator("departure_time", "arrival_time", mode="after")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # Naive times are taken as UTC so they sort alongside seeded flights.
        return v if v.tzinfo else v.replace(tzinfo=timezone.utc)

class HotelIn(BaseModel):
    name: str
    location: str
    rating: Optional[float] = None
    price_per_night: float
    description: Optional[str] = None
    image: Optional[str] = None
