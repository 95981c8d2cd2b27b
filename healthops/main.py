import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from healthops.config import get_settings
from healthops.core.exceptions import InvalidInputException
from healthops.core.logging import configure_logging

# IMPORT ROUTERS
from healthops.routers.health import router as health_router
from healthops.routers.tender_scoring import router as tender_scoring_router
from healthops.routers.capacity_planning import router as capacity_planning_router
from healthops.routers.errors import (
    invalid_input_exception_handler,
    validation_exception_handler,
)

logger = logging.getLogger(__name__)

settings = get_settings()


# SWAGGER UI - tag display order
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "Health"},
    {"name": "Tender Scoring"},
    {"name": "Capacity Planning"},
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings)
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION} ({settings.APP_ENV})")
    yield
    logger.info(f"Shutting down {settings.APP_NAME}")


# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
    lifespan=lifespan,
)

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

# REGISTER EXCEPTION HANDLERS
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(InvalidInputException, invalid_input_exception_handler)

# REGISTER ROUTERS (order matches _OPENAPI_TAGS)
app.include_router(health_router)               # Health
app.include_router(tender_scoring_router)       # Tender Scoring
app.include_router(capacity_planning_router)    # Capacity Planning


# ROOT ENDPOINT
@app.get("/", tags=["Root"], summary="Root endpoint")
async def root():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "status": "running"
    }


# RUN WITH UVICORN
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "healthops.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
