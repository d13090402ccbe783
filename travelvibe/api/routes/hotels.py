from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from travelvibe.api.deps import get_store, require_admin
from travelvibe.db.errors import RecordNotFoundError
from travelvibe.db.store import RecordStore
from travelvibe.schemas.auth import CallerIdentity
from travelvibe.schemas.catalog import HotelIn
from travelvibe.services.catalog_service import filter_max_price

router = APIRouter(tags=["hotels"])

@router.get("/hotels")
def list_hotels(store: RecordStore = Depends(get_store)):
    return store.find_all("hotels")

@router.get("/hotels/search")
def search_hotels(location: Optional[str] = None, maxPrice: Optional[float] = None,
                  store: RecordStore = Depends(get_store)):
    like = {"location": location} if location else {}
    hotels = store.find_where("hotels", like=like, order_by="price_per_night")
    if maxPrice is not None:
        hotels = filter_max_price(hotels, "price_per_night", maxPrice)
    return hotels

@router.get("/hotels/{hotel_id}")
def get_hotel(hotel_id: str, store: RecordStore = Depends(get_store)):
    hotel = store.find_by_id("hotels", hotel_id)
    if not hotel:
        raise HTTPException(status_code=404, detail="Hotel not found")
    return hotel

@router.post("/hotels", status_code=201)
def create_hotel(body: HotelIn, store: RecordStore = Depends(get_store),
                 me: CallerIdentity = Depends(require_admin)):
    return store.insert("hotels", body.model_dump(exclude_none=True))

@router.delete("/hotels/{hotel_id}")
def delete_hotel(hotel_id: str, store: RecordStore = Depends(get_store),
                 me: CallerIdentity = Depends(require_admin)):
    try:
        store.delete("hotels", hotel_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Hotel not found")
    return {"message": "Hotel deleted successfully"}
