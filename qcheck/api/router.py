from fastapi import APIRouter

from qcheck.api.routes import health, companies

api_router = APIRouter()
api_router.include_router(health.router, prefix="/health", tags=["health"])  # GET /
api_router.include_router(companies.router, prefix="/api/companies", tags=["companies"])  # read-only company queries
