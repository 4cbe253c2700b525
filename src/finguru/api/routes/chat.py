from typing import Any

from fastapi import APIRouter, Request

from finguru.api.ingress import read_body, submit
from finguru.schemas.requests import ChatMessageRequest

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("")
async def chat(request: Request) -> Any:
    return submit(ChatMessageRequest, await read_body(request))
