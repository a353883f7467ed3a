"""
API routes for the loan calculator.
"""

from fastapi import APIRouter

from app.api import calculations, reference

router = APIRouter()

# Include sub-routers
router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
router.include_router(reference.router, prefix="/reference", tags=["reference"])
