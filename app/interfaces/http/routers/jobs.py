"""Job catalog endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.core.config import Settings, get_settings
from app.interfaces.http.deps import get_job_catalog_service
from app.modules.jobs import Job, JobFilter, JobStorageError
from app.modules.jobs.service import JobCatalogService
from app.schemas import JobResponse

router = APIRouter()


def _to_schema(job: Job) -> JobResponse:
    return JobResponse.model_validate(job)


@router.get("", response_model=list[JobResponse], summary="List jobs, newest first")
async def list_jobs(
    job_type: JobFilter = Query(JobFilter.ALL, alias="type"),
    job_service: JobCatalogService = Depends(get_job_catalog_service),
) -> list[JobResponse]:
    try:
        jobs = await job_service.list_jobs(job_type)
    except JobStorageError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return [_to_schema(job) for job in jobs]


@router.post("/reseed", response_model=list[JobResponse], summary="Replace the catalog with generated jobs")
async def reseed_jobs(
    count: int | None = Query(None, gt=0, le=10000),
    settings: Settings = Depends(get_settings),
    job_service: JobCatalogService = Depends(get_job_catalog_service),
) -> list[JobResponse]:
    if not settings.maintenance.reseed_enabled:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Reseeding is disabled.")
    try:
        jobs = await job_service.reseed(count or settings.maintenance.reseed_count)
    except JobStorageError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return [_to_schema(job) for job in jobs]


@router.get("/{job_id}", response_model=JobResponse, summary="Get a job")
async def get_job(
    job_id: str,
    job_service: JobCatalogService = Depends(get_job_catalog_service),
) -> JobResponse:
    try:
        job = await job_service.get_job(job_id)
    except JobStorageError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    if job is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found.")
    return _to_schema(job)
