from typing import Any

from fastapi import APIRouter, HTTPException, Request

from finguru.api.ingress import submit
from finguru.schemas.requests import TransactionFilterRequest

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("")
def list_transactions(request: Request) -> Any:
    return submit(TransactionFilterRequest, dict(request.query_params))


@router.get("/search")
def search_transactions(request: Request) -> Any:
    q = request.query_params.get("q")
    if q is None:
        raise HTTPException(status_code=400, detail=["Search query is required"])

    data = {key: request.query_params[key] for key in ("page", "size") if key in request.query_params}
    data["search"] = q
    return submit(TransactionFilterRequest, data)
