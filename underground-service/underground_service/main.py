"""
GMUnderground Service
FastAPI application serving the campus feed, events board and marketplace
"""
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging

from .config import settings
from .infrastructure.storage import key_value_store
from .infrastructure.contact_client import contact_client
from .api.dependencies import get_viewer_id
from .api.routes import (
    catalogs_router,
    contact_router,
    favorites_router,
    listings_router,
    notifications_router,
    session_router,
    settings_router,
)
from .schemas import PagesResponse

# Configure logging
logging.basicConfig(
    level=logging.INFO if not settings.DEBUG else logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# Client-side views served by the frontend router
CLIENT_ROUTES = [
    "/",
    "/about",
    "/account",
    "/contact",
    "/events",
    "/favorites",
    "/feed",
    "/marketplace",
    "/mylistings",
    "/post",
    "/profile",
    "/projects",
    "/settings",
    "/skills",
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    # Startup
    logger.info("Starting GMUnderground Service...")

    await key_value_store.connect()
    logger.info(f"Viewer storage initialized ({settings.STORAGE_BACKEND})")

    await contact_client.start()

    logger.info(f"GMUnderground Service started successfully on port {settings.PORT}")

    yield

    # Shutdown
    logger.info("Shutting down GMUnderground Service...")

    await contact_client.stop()
    await key_value_store.disconnect()

    logger.info("GMUnderground Service shut down successfully")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="GMUnderground - campus feed, events and marketplace with mock accounts",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)

# Include routers
app.include_router(catalogs_router)
app.include_router(favorites_router)
app.include_router(listings_router)
app.include_router(session_router)
app.include_router(settings_router)
app.include_router(notifications_router)
app.include_router(contact_router)


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint"""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION
    }


@app.get("/api/v1/pages", response_model=PagesResponse, tags=["Pages"], dependencies=[Depends(get_viewer_id)])
async def list_pages():
    """Client view routes"""
    return PagesResponse(routes=CLIENT_ROUTES)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "underground_service.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
