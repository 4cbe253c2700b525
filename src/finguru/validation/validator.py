import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, TypeVar

from pydantic import ValidationError

from finguru.schemas.requests import (
    REQUIRED_FIELD,
    AccountRequest,
    AlertRuleRequest,
    BudgetRequest,
    ChatMessageRequest,
    FinancialProfileRequest,
    ManualAssetRequest,
    RequestShape,
    SavingsGoalRequest,
    TransactionFilterRequest,
)

logger = logging.getLogger(__name__)

ShapeT = TypeVar("ShapeT", bound=RequestShape)

SHAPES: dict[str, type[RequestShape]] = {
    "account": AccountRequest,
    "alert-rule": AlertRuleRequest,
    "budget": BudgetRequest,
    "chat": ChatMessageRequest,
    "profile": FinancialProfileRequest,
    "asset": ManualAssetRequest,
    "goal": SavingsGoalRequest,
    "transaction-filter": TransactionFilterRequest,
}


@dataclass(frozen=True)
class ValidationViolation:
    field: str | None
    message: str

    @classmethod
    def from_error(cls, error: Mapping[str, Any]) -> "ValidationViolation":
        loc = error.get("loc") or ()
        field = ".".join(str(part) for part in loc) or None
        if error.get("type") == REQUIRED_FIELD or field is None:
            return cls(field=field, message=error["msg"])
        return cls(field=field, message=f"{field}: {error['msg']}")


class RequestRejected(ValueError):
    def __init__(self, shape: str, violations: list[ValidationViolation]):
        self.shape = shape
        self.violations = violations
        super().__init__(f"{shape} rejected: " + "; ".join(self.messages))

    @property
    def messages(self) -> list[str]:
        return [violation.message for violation in self.violations]


def shape_for(name: str) -> type[RequestShape]:
    if name in SHAPES:
        return SHAPES[name]

    for shape in SHAPES.values():
        if shape.__name__ == name:
            return shape

    known = ", ".join(sorted(SHAPES))
    raise KeyError(f"Unknown request shape {name!r}; expected one of: {known}")


def validate_request(shape: type[ShapeT], data: Any) -> ShapeT:
    """Check ``data`` against ``shape`` and return the typed, frozen value.

    Every violated constraint is collected before raising, so a caller gets
    the whole batch in one ``RequestRejected``. ``None`` counts as an empty
    payload.
    """
    try:
        return shape.model_validate({} if data is None else data)
    except ValidationError as exc:
        violations = [ValidationViolation.from_error(error) for error in exc.errors()]
        logger.info(
            "%s rejected with %d violation(s)",
            shape.__name__,
            len(violations),
            extra={"shape": shape.__name__, "violations": [v.message for v in violations]},
        )
        raise RequestRejected(shape.__name__, violations) from exc


def load_json(raw: str | bytes) -> Any:
    """Parse JSON text with non-integer numbers as ``Decimal`` so scale survives."""
    return json.loads(raw, parse_float=Decimal)
