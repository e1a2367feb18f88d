"""API routes mounted under API_PREFIX."""

from fastapi import APIRouter

from storefront.api.routes import auth, products, users

router = APIRouter()
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(products.router, prefix="/products", tags=["products"])
