"""Email verification code endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.interfaces.http.deps import get_verification_service
from app.modules.verification import InvalidEmailError, VerificationDeliveryError
from app.modules.verification.service import VerificationService
from app.schemas import (
    VerificationCheckRequest,
    VerificationCheckResponse,
    VerificationSendRequest,
    VerificationSendResponse,
)

router = APIRouter()


@router.post("/send", response_model=VerificationSendResponse, summary="Mail a verification code")
async def send_verification_code(
    payload: VerificationSendRequest,
    verification_service: VerificationService = Depends(get_verification_service),
) -> VerificationSendResponse:
    try:
        await verification_service.send_code(payload.email)
    except InvalidEmailError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except VerificationDeliveryError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return VerificationSendResponse()


@router.post("/verify", response_model=VerificationCheckResponse, summary="Check a verification code")
async def verify_code(
    payload: VerificationCheckRequest,
    verification_service: VerificationService = Depends(get_verification_service),
) -> VerificationCheckResponse:
    try:
        verified = await verification_service.verify_code(payload.email, payload.code)
    except InvalidEmailError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return VerificationCheckResponse(verified=verified)
