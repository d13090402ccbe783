from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from travelvibe.api.deps import get_store, require_admin
from travelvibe.db.errors import RecordNotFoundError
from travelvibe.db.store import RecordStore
from travelvibe.schemas.auth import CallerIdentity
from travelvibe.schemas.catalog import FlightIn
from travelvibe.services.catalog_service import filter_departure_date

router = APIRouter(tags=["flights"])

@router.get("/flights")
def list_flights(store: RecordStore = Depends(get_store)):
    return store.find_all("flights")

@router.get("/flights/search")
def search_flights(origin: Optional[str] = None, destination: Optional[str] = None,
                   date: Optional[str] = None, store: RecordStore = Depends(get_store)):
    """Origin/destination are substring matches; date is YYYY-MM-DD in UTC."""
    like = {}
    if origin:
        like["origin"] = origin
    if destination:
        like["destination"] = destination
    flights = store.find_where("flights", like=like, order_by="departure_time")
    if date:
        flights = filter_departure_date(flights, date)
    return flights

@router.get("/flights/{flight_id}")
def get_flight(flight_id: str, store: RecordStore = Depends(get_store)):
    flight = store.find_by_id("flights", flight_id)
    if not flight:
        raise HTTPException(status_code=404, detail="Flight not found")
    return flight

@router.post("/flights", status_code=201)
def create_flight(body: FlightIn, store: RecordStore = Depends(get_store),
                  me: CallerIdentity = Depends(require_admin)):
    return store.insert("flights", body.model_dump(exclude_none=True))

@router.delete("/flights/{flight_id}")
def delete_flight(flight_id: str, store: RecordStore = Depends(get_store),
                  me: CallerIdentity = Depends(require_admin)):
    try:
        store.delete("flights", flight_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Flight not found")
    return {"message": "Flight deleted successfully"}
