from typing import Any
from uuid import UUID

from fastapi import APIRouter, Request

from finguru.api.ingress import read_body, submit
from finguru.schemas.requests import ManualAssetRequest

router = APIRouter(prefix="/networth", tags=["networth"])


@router.post("/assets")
async def add_asset(request: Request) -> Any:
    return submit(ManualAssetRequest, await read_body(request))


@router.put("/assets/{asset_id}")
async def update_asset(asset_id: UUID, request: Request) -> Any:
    return submit(ManualAssetRequest, await read_body(request), target_id=asset_id)
