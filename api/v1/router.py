# api/v1/router.py
from fastapi import APIRouter

from . import advice, analytics, profile, records

api_router = APIRouter()

api_router.include_router(advice.router,    prefix="/advice",    tags=["Advice"])
api_router.include_router(records.router,   prefix="/records",   tags=["Records"])
api_router.include_router(profile.router,   prefix="/profile",   tags=["Profile"])
api_router.include_router(analytics.router, prefix="/analytics", tags=["Analytics"])
