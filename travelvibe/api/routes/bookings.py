from fastapi import APIRouter, Depends
from travelvibe.api.deps import get_store, get_current_user
from travelvibe.db.store import RecordStore
from travelvibe.schemas.auth import CallerIdentity
from travelvibe.schemas.booking import BookingCreate
from travelvibe.services import booking_service

router = APIRouter(tags=["bookings"])

@router.get("/bookings")
def list_bookings(store: RecordStore = Depends(get_store),
                  me: CallerIdentity = Depends(get_current_user)):
    return booking_service.list_bookings(store, me)

@router.post("/bookings", status_code=201)
def create_booking(body: BookingCreate, store: RecordStore = Depends(get_store),
                   me: CallerIdentity = Depends(get_current_user)):
    return booking_service.create_booking(store, me, body)
