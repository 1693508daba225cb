"""
API routes for the calculation engine.
"""

from fastapi import APIRouter

from quantcalc.api import construction, conversions, finance, health, math_utils

router = APIRouter()

# Include sub-routers
router.include_router(finance.router, prefix="/calculate/finance", tags=["finance"])
router.include_router(health.router, prefix="/calculate/health", tags=["health"])
router.include_router(math_utils.router, prefix="/calculate/math", tags=["math"])
router.include_router(conversions.router, prefix="/calculate/convert", tags=["conversions"])
router.include_router(
    construction.router, prefix="/calculate/construction", tags=["construction"]
)
