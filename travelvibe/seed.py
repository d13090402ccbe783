import logging
import uuid
from datetime import datetime, timezone

from travelvibe.core.config import Settings
from travelvibe.core.security import hash_password
from travelvibe.db.store import RecordStore

logger = logging.getLogger(__name__)

LOCATIONS = [
    "New York", "Los Angeles", "Chicago", "Houston", "Phoenix",
    "Philadelphia", "San Antonio", "San Diego", "Dallas", "San Jose",
    "Austin", "Jacksonville", "Fort Worth", "Columbus", "Charlotte",
    "San Francisco", "Indianapolis", "Seattle", "Denver", "Boston",
]

CARS = [
    {"model": "Camry", "brand": "Toyota", "location": "New York", "price_per_day": 45.00, "car_type": "Sedan", "description": "Comfortable sedan for city driving", "seating_capacity": 5, "available_cars": 10},
    {"model": "Civic", "brand": "Honda", "location": "Los Angeles", "price_per_day": 42.00, "car_type": "Sedan", "description": "Reliable and fuel-efficient", "seating_capacity": 5, "available_cars": 8},
    {"model": "Mustang", "brand": "Ford", "location": "Chicago", "price_per_day": 85.00, "car_type": "Sports", "description": "Powerful sports car", "seating_capacity": 4, "available_cars": 3},
    {"model": "Explorer", "brand": "Ford", "location": "Houston", "price_per_day": 75.00, "car_type": "SUV", "description": "Spacious family SUV", "seating_capacity": 7, "available_cars": 5},
    {"model": "Model 3", "brand": "Tesla", "location": "Phoenix", "price_per_day": 65.00, "car_type": "Electric", "description": "Electric vehicle with autopilot", "seating_capacity": 5, "available_cars": 7},
]


def _utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


FLIGHTS = [
    {"airline": "American Airlines", "flight_number": "AA101", "origin": "New York", "destination": "Los Angeles", "departure_time": _utc(2025, 12, 15, 8, 0), "arrival_time": _utc(2025, 12, 15, 11, 30), "price": 299.99, "available_seats": 150},
    {"airline": "Delta Airlines", "flight_number": "DL202", "origin": "Chicago", "destination": "Miami", "departure_time": _utc(2025, 12, 20, 14, 0), "arrival_time": _utc(2025, 12, 20, 18, 0), "price": 189.99, "available_seats": 120},
    {"airline": "United Airlines", "flight_number": "UA303", "origin": "Los Angeles", "destination": "Seattle", "departure_time": _utc(2025, 12, 18, 9, 0), "arrival_time": _utc(2025, 12, 18, 11, 30), "price": 159.99, "available_seats": 180},
    {"airline": "Southwest Airlines", "flight_number": "SW404", "origin": "Dallas", "destination": "Las Vegas", "departure_time": _utc(2025, 12, 22, 16, 0), "arrival_time": _utc(2025, 12, 22, 17, 30), "price": 89.99, "available_seats": 200},
]

HOTELS = [
    {"name": "Grand Plaza Hotel", "location": "New York", "rating": 4.5, "price_per_night": 199.99, "description": "Luxury hotel in the heart of Manhattan", "image": "/images/hotels/grand-plaza.jpg"},
    {"name": "Sunset Beach Resort", "location": "Los Angeles", "rating": 4.2, "price_per_night": 249.99, "description": "Beachfront resort with ocean views", "image": "/images/hotels/sunset-beach.jpg"},
    {"name": "Downtown Business Hotel", "location": "Chicago", "rating": 4.0, "price_per_night": 179.99, "description": "Modern hotel perfect for business travelers", "image": "/images/hotels/downtown-business.jpg"},
    {"name": "Mountain View Lodge", "location": "Denver", "rating": 4.3, "price_per_night": 159.99, "description": "Cozy lodge with mountain views", "image": "/images/hotels/mountain-view.jpg"},
    {"name": "City Center Inn", "location": "Miami", "rating": 3.8, "price_per_night": 129.99, "description": "Affordable hotel in the city center", "image": "/images/hotels/city-center.jpg"},
]

# Columns that identify a seed row, so re-seeding never duplicates it.
NATURAL_KEYS = {
    "locations": ("name",),
    "cars": ("brand", "model", "location"),
    "flights": ("flight_number",),
    "hotels": ("name",),
}


def ensure_row(store: RecordStore, table: str, row: dict) -> bool:
    where = {k: row[k] for k in NATURAL_KEYS[table]}
    if store.find_where(table, where=where):
        return False
    store.insert(table, row)
    return True


def ensure_admin(store: RecordStore, email: str, password: str, name: str) -> bool:
    if store.find_where("users", where={"email": email}):
        return False
    store.insert("users", {
        "id": str(uuid.uuid4()),
        "name": name,
        "email": email,
        "password": hash_password(password),
        "role": "ADMIN",
    })
    return True


def run(store: RecordStore, settings: Settings | None = None) -> int:
    """Insert reference rows that are missing. Returns how many were added."""
    added = 0
    for name in LOCATIONS:
        added += ensure_row(store, "locations", {"name": name})
    for table, rows in (("cars", CARS), ("flights", FLIGHTS), ("hotels", HOTELS)):
        for row in rows:
            added += ensure_row(store, table, dict(row))

    if settings is not None and settings.ADMIN_EMAIL and settings.ADMIN_PASSWORD:
        if ensure_admin(store, settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD, settings.ADMIN_NAME):
            logger.info("Created admin user %s", settings.ADMIN_EMAIL)
            added += 1

    logger.info("Seeded %d reference rows (%s storage)", added, store.mode)
    return added
