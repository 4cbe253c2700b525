from typing import Any
from uuid import UUID

from fastapi import APIRouter, Request

from finguru.api.ingress import read_body, submit
from finguru.schemas.requests import AccountRequest, TransactionFilterRequest

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.post("")
async def create_account(request: Request) -> Any:
    return submit(AccountRequest, await read_body(request))


@router.put("/{account_id}")
async def update_account(account_id: UUID, request: Request) -> Any:
    return submit(AccountRequest, await read_body(request), target_id=account_id)


@router.get("/{account_id}/transactions")
def account_transactions(account_id: UUID, request: Request) -> Any:
    data = dict(request.query_params)
    data["accountId"] = str(account_id)
    return submit(TransactionFilterRequest, data)
