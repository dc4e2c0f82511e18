"""Company Services API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CompanyServicesError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py; main.py only wires them
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from company_services.api.error_handlers import register_error_handlers
from company_services.api.routes import departments, employees, health, timecards
from company_services.config import get_settings
from company_services.infrastructure import database
from company_services.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(
        "Company Services API started",
        extra={"company": settings.company_name},
    )
    yield
    if database.db_manager:
        await database.db_manager.engine.dispose()
    logger.info("Company Services API shutting down")


app = FastAPI(
    title="Company Services API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(departments.router)
app.include_router(employees.router)
app.include_router(timecards.router)

register_error_handlers(app)
