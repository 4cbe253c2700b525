from typing import Any
from uuid import UUID

from fastapi import APIRouter, Request

from finguru.api.ingress import read_body, submit
from finguru.schemas.requests import BudgetRequest

router = APIRouter(prefix="/budgets", tags=["budgets"])


@router.post("")
async def create_budget(request: Request) -> Any:
    return submit(BudgetRequest, await read_body(request))


@router.put("/{budget_id}")
async def update_budget(budget_id: UUID, request: Request) -> Any:
    return submit(BudgetRequest, await read_body(request), target_id=budget_id)
