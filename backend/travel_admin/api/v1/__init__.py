from fastapi import APIRouter

from . import autor_tours, events, hotels, multi_day_tours, one_day_tours, places, regions

api_router = APIRouter()
api_router.include_router(regions.router)
api_router.include_router(hotels.router)
api_router.include_router(events.router)
api_router.include_router(places.router)
api_router.include_router(one_day_tours.router)
api_router.include_router(multi_day_tours.router)
api_router.include_router(autor_tours.router)
