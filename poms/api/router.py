"""API router aggregation.

Includes all endpoint modules with consistent prefix and tags. Mounted at
/api by poms.main; /api/ is public at the edge, so every endpoint that needs
a session checks it through poms.api.dependencies.
"""

from fastapi import APIRouter

from poms.api.endpoints import admin_users, auth, companies, company, health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(admin_users.router, prefix="/admin/users", tags=["admin"])
api_router.include_router(companies.router, prefix="/companies", tags=["companies"])
api_router.include_router(company.router, prefix="/company", tags=["company"])
