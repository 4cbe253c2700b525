from typing import Any
from uuid import UUID

from fastapi import HTTPException, Request

from finguru.dispatch.dispatcher import dispatcher
from finguru.schemas.requests import RequestShape
from finguru.validation.validator import RequestRejected, load_json


async def read_body(request: Request) -> Any:
    """Decode the JSON body keeping decimal literals exact; an empty body is ``None``."""
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return load_json(raw)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=["Malformed JSON request body"]) from exc


def submit(shape: type[RequestShape], data: Any, target_id: UUID | None = None) -> Any:
    try:
        return dispatcher.submit(shape, data, target_id=target_id)
    except RequestRejected as exc:
        raise HTTPException(status_code=400, detail=exc.messages) from exc
