"""
Storefront Cart Application

Shopping cart, wishlist and mini cart API backed by the cart resolution
and pricing composition engine.
"""

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .context import WorkContextMiddleware
from .core.config import settings
from .routes import cart_router, wishlist_router

# Load environment variables
load_dotenv()

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Storefront Cart starting up...")
    logger.info(f"Primary currency: {settings.primary_currency_code}")
    logger.info(f"Prices include tax: {settings.prices_include_tax}")
    yield
    logger.info("Storefront Cart shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Shopping cart resolution and pricing for the storefront",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Customer and currency of each request
app.add_middleware(WorkContextMiddleware)

# Include API routers
app.include_router(cart_router)
app.include_router(wishlist_router)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "storefront-cart",
        "primary_currency": settings.primary_currency_code,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "storefront_cart.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
