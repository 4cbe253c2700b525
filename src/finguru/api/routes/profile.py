from typing import Any

from fastapi import APIRouter, Request

from finguru.api.ingress import read_body, submit
from finguru.schemas.requests import FinancialProfileRequest

router = APIRouter(prefix="/profile", tags=["profile"])


@router.put("")
async def update_profile(request: Request) -> Any:
    return submit(FinancialProfileRequest, await read_body(request))
