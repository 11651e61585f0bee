"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from court_scheduler.api import admin, bookings, courts, holidays, schedules
from court_scheduler.core.config import settings
from court_scheduler.core.database import init_models
from court_scheduler.core.exceptions import register_exception_handlers

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Court Scheduler")
    logger.info(f"Debug mode: {settings.DEBUG}")

    await init_models()

    yield

    # Shutdown
    logger.info("Shutting down Court Scheduler")


# Create FastAPI app
app = FastAPI(
    title="Court Scheduler",
    description="Weekly court calendars with public booking and admin management",
    version="1.0.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(schedules.router)
app.include_router(bookings.router)
app.include_router(courts.router)
app.include_router(holidays.router)
app.include_router(admin.router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
