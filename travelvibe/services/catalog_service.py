from datetime import datetime, timezone

from travelvibe.db.store import Record


def filter_max_price(items: list[Record], price_field: str, max_price: float) -> list[Record]:
    """Keep items priced at or below max_price. Applied after the store query."""
    return [i for i in items if i.get(price_field) is not None and float(i[price_field]) <= max_price]


def utc_date_str(value) -> str | None:
    """YYYY-MM-DD of a timestamp in UTC. Naive values are already UTC."""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    if not isinstance(value, datetime):
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.date().isoformat()


def filter_departure_date(flights: list[Record], date_str: str) -> list[Record]:
    return [f for f in flights if utc_date_str(f.get("departure_time")) == date_str]
