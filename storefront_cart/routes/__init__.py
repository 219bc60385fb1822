# API Routes

from .cart import router as cart_router
from .wishlist import router as wishlist_router

__all__ = ["cart_router", "wishlist_router"]
