from fastapi import APIRouter, Depends
from travelvibe.api.deps import get_store, get_current_user
from travelvibe.db.store import RecordStore
from travelvibe.schemas.auth import CallerIdentity
from travelvibe.schemas.payment import PaymentCreate
from travelvibe.services import booking_service

router = APIRouter(tags=["payments"])

@router.get("/payments")
def list_payments(store: RecordStore = Depends(get_store),
                  me: CallerIdentity = Depends(get_current_user)):
    return booking_service.list_payments(store, me)

@router.post("/payments", status_code=201)
def create_payment(body: PaymentCreate, store: RecordStore = Depends(get_store),
                   me: CallerIdentity = Depends(get_current_user)):
    return booking_service.create_payment(store, me, body)
