from .orders import router as orders_router
from .restaurants import router as restaurants_router
from .users import router as users_router

__all__ = [
    "orders_router",
    "restaurants_router",
    "users_router",
]
