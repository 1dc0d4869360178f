from fastapi import APIRouter

from app.api.v1.routers import business_hours as business_hours_router
from app.api.v1.routers import stores as stores_router

router = APIRouter()

# hours editor routes
router.include_router(business_hours_router.router)

# store routes
router.include_router(stores_router.router)
