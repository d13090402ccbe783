from fastapi import APIRouter
from travelvibe.api.routes.auth import router as auth_router
from travelvibe.api.routes.locations import router as locations_router
from travelvibe.api.routes.cars import router as cars_router
from travelvibe.api.routes.flights import router as flights_router
from travelvibe.api.routes.hotels import router as hotels_router
from travelvibe.api.routes.bookings import router as bookings_router
from travelvibe.api.routes.payments import router as payments_router
from travelvibe.api.routes.users import router as users_router

api_router = APIRouter(prefix="/api")
api_router.include_router(auth_router)
api_router.include_router(locations_router)
api_router.include_router(cars_router)
api_router.include_router(flights_router)
api_router.include_router(hotels_router)
api_router.include_router(bookings_router)
api_router.include_router(payments_router)
api_router.include_router(users_router)
