from datetime import date
from decimal import Decimal
from typing import Annotated, Any, Callable
from uuid import UUID

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from finguru.domain.models import AccountType

REQUIRED_FIELD = "required_field"


def require(message: str, *, allow_blank: bool = True) -> Callable[[Any], Any]:
    """Build a before-validator that rejects a missing value with ``message``.

    With ``allow_blank=False`` a string made only of whitespace is treated as
    missing too. The value itself is passed through untouched.
    """

    def check(value: Any) -> Any:
        if value is None:
            raise PydanticCustomError(REQUIRED_FIELD, message)
        if not allow_blank and isinstance(value, str) and not value.strip():
            raise PydanticCustomError(REQUIRED_FIELD, message)
        return value

    return check


AccountName = Annotated[str, BeforeValidator(require("Account name is required", allow_blank=False))]
RequiredAccountType = Annotated[AccountType, BeforeValidator(require("Account type is required"))]
ChatMessage = Annotated[str, BeforeValidator(require("Message cannot be empty", allow_blank=False))]


class RequestShape(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class AccountRequest(RequestShape):
    name: AccountName = Field(default=None, validate_default=True)
    institution: str | None = None
    type: RequiredAccountType = Field(default=None, validate_default=True)
    last4: str | None = None
    credit_limit: Decimal | None = None
    current_balance: Decimal | None = None
    available_credit: Decimal | None = None
    apr: Decimal | None = None
    promo_apr: Decimal | None = None
    promo_apr_end_date: date | None = None
    payment_due_day: int | None = None
    min_payment: Decimal | None = None
    rewards_program: str | None = None
    color: str | None = None


class AlertRuleRequest(RequestShape):
    name: str | None = None
    rule_type: str | None = None
    condition_operator: str | None = None
    threshold_amount: Decimal | None = None
    category: str | None = None
    account_id: UUID | None = None


class BudgetRequest(RequestShape):
    category: str | None = None
    monthly_limit: Decimal | None = None


class ChatMessageRequest(RequestShape):
    message: ChatMessage = Field(default=None, validate_default=True)
    conversation_id: str | None = None


class FinancialProfileRequest(RequestShape):
    monthly_income: Decimal | None = None
    income_source: str | None = None
    pay_frequency: str | None = None
    emergency_fund_target_months: int | None = None
    notes: str | None = None


class ManualAssetRequest(RequestShape):
    name: str | None = None
    asset_type: str | None = None
    asset_class: str | None = None
    current_value: Decimal | None = None
    notes: str | None = None


class SavingsGoalRequest(RequestShape):
    name: str | None = None
    category: str | None = None
    target_amount: Decimal | None = None
    current_amount: Decimal | None = None
    target_date: date | None = None
    linked_account_id: UUID | None = None
    color: str | None = None
    notes: str | None = None


class TransactionFilterRequest(RequestShape):
    account_id: UUID | None = None
    category: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    min_amount: Decimal | None = None
    max_amount: Decimal | None = None
    search: str | None = None
    page: int = 0
    size: int = 50
