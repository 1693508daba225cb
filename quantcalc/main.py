"""
Main FastAPI application entry point.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from quantcalc.api import router as api_router
from quantcalc.calculations.errors import CalculationError, UnknownConversionError
from quantcalc.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Finance, health and unit-conversion calculators",
    version=settings.version,
    debug=settings.debug,
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.exception_handler(CalculationError)
async def calculation_error_handler(request: Request, exc: CalculationError):
    """Map engine errors to 400 responses."""
    logger.warning(
        f"Rejected calculation {request.url.path}: {type(exc).__name__}: {exc}"
    )

    content = {"detail": str(exc), "error": type(exc).__name__}
    if isinstance(exc, UnknownConversionError):
        content["available"] = exc.available

    return JSONResponse(status_code=400, content=content)


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "version": settings.version}
