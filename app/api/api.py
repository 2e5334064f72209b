from fastapi import APIRouter
from app.api.routes import analysis, reports, leads, analytics, health

api_router = APIRouter()

# Include all route modules
api_router.include_router(analysis.router)
api_router.include_router(reports.router)
api_router.include_router(leads.router)
api_router.include_router(analytics.router)
api_router.include_router(health.router)
