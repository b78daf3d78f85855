"""HTTP routes."""

from fastapi import APIRouter

from app.api.routes import auth, health, products

router = APIRouter()
router.include_router(health.router, tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(products.router, prefix="/fashion", tags=["fashion"])
