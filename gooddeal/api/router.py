from fastapi import APIRouter

from gooddeal.api.routes import admin, auth
from gooddeal.domains.ecommerce.api.routes import orders_router, products_router

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(products_router)
api_router.include_router(orders_router)
api_router.include_router(admin.router)
