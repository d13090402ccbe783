from sqlalchemy import Table

from travelvibe.db.base import Base

# Import all models so they register on Base.metadata
from travelvibe.models.user import User  # noqa: F401
from travelvibe.models.location import Location  # noqa: F401
from travelvibe.models.car import Car  # noqa: F401
from travelvibe.models.flight import Flight  # noqa: F401
from travelvibe.models.hotel import Hotel  # noqa: F401
from travelvibe.models.booking import Booking  # noqa: F401
from travelvibe.models.payment import Payment  # noqa: F401

# The only names the record stores will accept; anything else is rejected
# before a statement is built.
TABLE_NAMES = ("users", "locations", "cars", "flights", "hotels", "bookings", "payments")

TABLES: dict[str, Table] = {name: Base.metadata.tables[name] for name in TABLE_NAMES}
