from typing import Any
from uuid import UUID

from fastapi import APIRouter, Request

from finguru.api.ingress import read_body, submit
from finguru.schemas.requests import AlertRuleRequest

router = APIRouter(prefix="/alert-rules", tags=["alert-rules"])


@router.post("")
async def create_rule(request: Request) -> Any:
    return submit(AlertRuleRequest, await read_body(request))


@router.put("/{rule_id}")
async def update_rule(rule_id: UUID, request: Request) -> Any:
    return submit(AlertRuleRequest, await read_body(request), target_id=rule_id)
