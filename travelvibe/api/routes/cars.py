from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from travelvibe.api.deps import get_store, require_admin
from travelvibe.db.errors import RecordNotFoundError
from travelvibe.db.store import RecordStore
from travelvibe.schemas.auth import CallerIdentity
from travelvibe.schemas.catalog import CarIn
from travelvibe.services.catalog_service import filter_max_price

router = APIRouter(tags=["cars"])

@router.get("/cars")
def list_cars(store: RecordStore = Depends(get_store)):
    return store.find_all("cars")

@router.get("/cars/search")
def search_cars(location: Optional[str] = None, maxPrice: Optional[float] = None,
                store: RecordStore = Depends(get_store)):
    like = {"location": location} if location else {}
    cars = store.find_where("cars", like=like)
    if maxPrice is not None:
        cars = filter_max_price(cars, "price_per_day", maxPrice)
    return cars

@router.get("/cars/{car_id}")
def get_car(car_id: str, store: RecordStore = Depends(get_store)):
    car = store.find_by_id("cars", car_id)
    if not car:
        raise HTTPException(status_code=404, detail="Car not found")
    return car

@router.post("/cars", status_code=201)
def create_car(body: CarIn, store: RecordStore = Depends(get_store),
               me: CallerIdentity = Depends(require_admin)):
    return store.insert("cars", body.model_dump(exclude_none=True))

@router.delete("/cars/{car_id}")
def delete_car(car_id: str, store: RecordStore = Depends(get_store),
               me: CallerIdentity = Depends(require_admin)):
    try:
        store.delete("cars", car_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Car not found")
    return {"message": "Car deleted successfully"}
