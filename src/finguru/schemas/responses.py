from typing import Any
from uuid import UUID

from pydantic import BaseModel


class AcceptedRequest(BaseModel):
    shape: str
    target_id: UUID | None = None
    payload: dict[str, Any]
