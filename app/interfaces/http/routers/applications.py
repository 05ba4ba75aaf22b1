"""Apply-to-job endpoint."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.interfaces.http.deps import get_application_service
from app.modules.accounts import AccountNotFoundError
from app.modules.applications import ApplicationStorageError
from app.modules.applications.service import ApplicationService
from app.modules.jobs import JobNotFoundError
from app.schemas import ApplyRequest, ApplyResponse

router = APIRouter()


@router.post(
    "",
    response_model=ApplyResponse,
    summary="Apply to a job",
    description=(
        "STABLE jobs cost a fixed number of tokens; FREELANCE jobs are free. "
        "Already-applied and insufficient-balance outcomes return 200 with success=false."
    ),
)
async def apply_to_job(
    payload: ApplyRequest,
    application_service: ApplicationService = Depends(get_application_service),
) -> ApplyResponse:
    try:
        result = await application_service.apply(payload.account_id, payload.job_id)
    except (JobNotFoundError, AccountNotFoundError) as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ApplicationStorageError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return ApplyResponse.model_validate(result)
