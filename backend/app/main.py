"""
Car Registry API - FastAPI Application Entry Point

This module initializes the FastAPI application with middleware,
routes, and lifecycle event handlers.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1 import cars, health
from app.core.config import settings
from app.core.database import init_db, close_db
from app.core.logging_config import setup_logging
from app.middleware.logging import LoggingMiddleware
from app.middleware.request_id import RequestIDMiddleware


VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
        - Set up logging
        - Initialize database (create tables when enabled)

    Shutdown:
        - Close database connections
    """
    setup_logging(level=settings.log_level, json_format=settings.log_json)
    await init_db()

    yield

    await close_db()


app = FastAPI(
    title=settings.project_name,
    version=VERSION,
    description="Registry of cars keyed by registration number",
    openapi_url=f"{settings.api_prefix}/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


# Middleware is executed in reverse order of registration
# (last registered = first executed)

# Logging middleware (runs after RequestID to access request_id)
app.add_middleware(LoggingMiddleware)

# Request ID middleware (sets correlation ID)
app.add_middleware(RequestIDMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(health.router, prefix=settings.api_prefix, tags=["health"])
app.include_router(cars.router, prefix=settings.api_prefix, tags=["cars"])


@app.get("/")
async def root():
    """
    Root endpoint.

    Returns basic API information.
    """
    return {
        "message": settings.project_name,
        "version": VERSION,
        "docs": "/docs",
    }
