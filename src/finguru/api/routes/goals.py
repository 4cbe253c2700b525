from typing import Any
from uuid import UUID

from fastapi import APIRouter, Request

from finguru.api.ingress import read_body, submit
from finguru.schemas.requests import SavingsGoalRequest

router = APIRouter(prefix="/goals", tags=["goals"])


@router.post("")
async def create_goal(request: Request) -> Any:
    return submit(SavingsGoalRequest, await read_body(request))


@router.put("/{goal_id}")
async def update_goal(goal_id: UUID, request: Request) -> Any:
    return submit(SavingsGoalRequest, await read_body(request), target_id=goal_id)
