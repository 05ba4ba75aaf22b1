from fastapi import APIRouter

from app.interfaces.http.routers import accounts, applications, jobs, verification


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(accounts.router, prefix="/accounts", tags=["accounts"])
    router.include_router(jobs.router, prefix="/jobs", tags=["jobs"])
    router.include_router(applications.router, prefix="/applications", tags=["applications"])
    router.include_router(verification.router, prefix="/verification", tags=["verification"])
    return router


__all__ = [
    "create_api_router",
]
