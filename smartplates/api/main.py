"""FastAPI application setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from smartplates import __version__
from smartplates.api.config import config
from smartplates.api.routers.grocery_lists import router as grocery_lists_router
from smartplates.api.routers.health import router as health_router
from smartplates.api.routers.meal_plans import router as meal_plans_router
from smartplates.api.routers.recipes import router as recipes_router
from smartplates.core.database import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database on startup."""
    init_db()
    yield


# Create FastAPI app
app = FastAPI(
    title="SmartPlates API",
    description="REST API for SmartPlates - meal plans, grocery lists and recipe search",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# Configure CORS, all origins allowed in development
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health_router)
app.include_router(recipes_router)
app.include_router(meal_plans_router)
app.include_router(grocery_lists_router)
