import uuid

from travelvibe.db.store import Record, RecordStore
from travelvibe.schemas.auth import CallerIdentity
from travelvibe.schemas.booking import BookingCreate
from travelvibe.schemas.payment import PaymentCreate


def create_booking(store: RecordStore, caller: CallerIdentity, body: BookingCreate) -> Record:
    # No availability check or decrement: a booking only records intent.
    return store.insert("bookings", {
        "id": str(uuid.uuid4()),
        "user_id": caller.id,
        "type": body.type,
        "item_id": body.itemId,
        "num_persons": body.numPersons or 1,
        "total_amount": body.totalAmount,
        "status": "CONFIRMED",
    })


def create_payment(store: RecordStore, caller: CallerIdentity, body: PaymentCreate) -> Record:
    # bookingId is stored as given; it is not looked up first.
    return store.insert("payments", {
        "id": str(uuid.uuid4()),
        "booking_id": body.bookingId,
        "user_id": caller.id,
        "amount": body.amount,
        "payment_method": body.paymentMethod,
        "status": "SUCCESS",
    })


def list_bookings(store: RecordStore, caller: CallerIdentity) -> list[Record]:
    return store.find_where("bookings", where={"user_id": caller.id}, order_by="booking_date", descending=True)


def list_payments(store: RecordStore, caller: CallerIdentity) -> list[Record]:
    return store.find_where("payments", where={"user_id": caller.id}, order_by="payment_date", descending=True)
