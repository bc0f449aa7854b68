"""FastAPI application for the FX futures arbitrage dashboard."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fxarb.core.errors import AppError, DataFetchError
from fxarb.core.logging import configure_logging, get_logger
from fxarb.settings import get_settings
from fxarb.routers import (
    bootstrap, calculations, currency_pairs, health, market_data, yield_curves
)

# Get settings
settings = get_settings()

configure_logging("fxarb-api", settings.log_level, settings.log_format)
logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.api_title,
    description=settings.api_description,
    version=settings.api_version,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Serialise application errors with their type and details."""
    status_code = 502 if isinstance(exc, DataFetchError) else 422
    logger.warning(
        "request_failed",
        path=request.url.path,
        error_type=exc.error_type.value,
        error=exc.message
    )
    return JSONResponse(status_code=status_code, content=exc.to_dict())


# Include routers
app.include_router(health.router, tags=["health"])
app.include_router(currency_pairs.router, prefix="/api")
app.include_router(market_data.router, prefix="/api")
app.include_router(yield_curves.router, prefix="/api")
app.include_router(bootstrap.router, prefix="/api")
app.include_router(calculations.router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": settings.api_title,
        "version": settings.api_version,
        "docs": "/docs",
        "status": "running",
        "service": "fxarb-api"
    }
