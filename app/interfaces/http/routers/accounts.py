"""Wallet connect and account lookup endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.interfaces.http.deps import get_account_service, get_application_service
from app.modules.accounts import AccountNotFoundError, AccountStorageError, InvalidWalletAddressError
from app.modules.accounts.service import AccountService
from app.modules.applications import ApplicationStorageError
from app.modules.applications.service import ApplicationService
from app.schemas import AccountResponse, ApplicationResponse, WalletConnectRequest

router = APIRouter()


@router.post("/connect", response_model=AccountResponse, summary="Connect a wallet, creating its account on first use")
async def connect_wallet(
    payload: WalletConnectRequest,
    account_service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    try:
        account = await account_service.connect(payload.wallet_address)
    except InvalidWalletAddressError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except AccountStorageError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return AccountResponse.model_validate(account)


@router.get("/{account_id}", response_model=AccountResponse, summary="Get an account")
async def get_account(
    account_id: str,
    account_service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    try:
        account = await account_service.get_by_id(account_id)
    except AccountStorageError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    if account is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")
    return AccountResponse.model_validate(account)


@router.get(
    "/{account_id}/applications",
    response_model=list[ApplicationResponse],
    summary="List the jobs an account has applied to",
)
async def list_account_applications(
    account_id: str,
    application_service: ApplicationService = Depends(get_application_service),
) -> list[ApplicationResponse]:
    try:
        applications = await application_service.list_for_account(account_id)
    except AccountNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ApplicationStorageError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return [ApplicationResponse.model_validate(application) for application in applications]
