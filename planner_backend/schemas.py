import datetime as dt
from decimal import Decimal
from typing import ClassVar, FrozenSet, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"

Priority = Literal["high", "medium", "low"]
ScheduledItemType = Literal["meeting", "todo", "custom"]
AccountType = Literal["checking", "savings", "credit", "investment"]
TransactionType = Literal["income", "expense", "transfer"]


class WireModel(BaseModel):
    """Request body: camelCase on the wire, snake_case in Python, no unknown keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class PatchModel(WireModel):
    # Fields that may be omitted from a patch but never set to null.
    required_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_null_required(self):
        for name in self.model_fields_set & self.required_fields:
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class MeetingCreate(WireModel):
    title: str = Field(min_length=1)
    start_time: str = Field(pattern=TIME_PATTERN)
    duration: int = Field(gt=0)
    color: Optional[str] = "#3B82F6"
    date: dt.date


class MeetingPatch(PatchModel):
    required_fields = frozenset({"title", "start_time", "duration", "date"})

    title: Optional[str] = Field(None, min_length=1)
    start_time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    duration: Optional[int] = Field(None, gt=0)
    color: Optional[str] = None
    date: Optional[dt.date] = None


class TodoCreate(WireModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    priority: Priority = "medium"
    estimated_duration: Optional[int] = Field(30, ge=0)
    completed: Optional[bool] = False
    project_id: Optional[int] = None
    due_date: Optional[dt.date] = None


class TodoPatch(PatchModel):
    required_fields = frozenset({"title", "priority"})

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    priority: Optional[Priority] = None
    estimated_duration: Optional[int] = Field(None, ge=0)
    completed: Optional[bool] = None
    project_id: Optional[int] = None
    due_date: Optional[dt.date] = None


class ProjectCreate(WireModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    color: Optional[str] = "#7C3AED"


class ProjectPatch(PatchModel):
    required_fields = frozenset({"name"})

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    color: Optional[str] = None


class ScheduledItemCreate(WireModel):
    title: str = Field(min_length=1)
    start_time: str = Field(pattern=TIME_PATTERN)
    duration: int = Field(gt=0)
    date: dt.date
    type: ScheduledItemType
    original_id: Optional[int] = None
    color: Optional[str] = "#6B7280"


class ScheduledItemPatch(PatchModel):
    required_fields = frozenset({"title", "start_time", "duration", "date", "type"})

    title: Optional[str] = Field(None, min_length=1)
    start_time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    duration: Optional[int] = Field(None, gt=0)
    date: Optional[dt.date] = None
    type: Optional[ScheduledItemType] = None
    original_id: Optional[int] = None
    color: Optional[str] = None


class PasswordCreate(WireModel):
    site_name: str = Field(min_length=1)
    url: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    password: str = Field(min_length=1)
    notes: Optional[str] = None


class PasswordPatch(PatchModel):
    required_fields = frozenset({"site_name", "password"})

    site_name: Optional[str] = Field(None, min_length=1)
    url: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = Field(None, min_length=1)
    notes: Optional[str] = None


class GoalCreate(WireModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    target_value: Optional[int] = None
    current_value: Optional[int] = 0
    unit: Optional[str] = None
    category: str = Field(min_length=1)
    start_date: dt.date
    target_date: Optional[dt.date] = None
    is_active: Optional[bool] = True


class GoalPatch(PatchModel):
    required_fields = frozenset({"title", "category", "start_date"})

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    target_value: Optional[int] = None
    current_value: Optional[int] = None
    unit: Optional[str] = None
    category: Optional[str] = Field(None, min_length=1)
    start_date: Optional[dt.date] = None
    target_date: Optional[dt.date] = None
    is_active: Optional[bool] = None


class HabitTrackingCreate(WireModel):
    habit_id: int
    date: dt.date
    status: str = Field(min_length=1)
    icon_key: str = Field(min_length=1)


class HabitTrackingPatch(PatchModel):
    required_fields = frozenset({"habit_id", "date", "status", "icon_key"})

    habit_id: Optional[int] = None
    date: Optional[dt.date] = None
    status: Optional[str] = Field(None, min_length=1)
    icon_key: Optional[str] = Field(None, min_length=1)


class HabitLegendCreate(WireModel):
    icon_key: str = Field(min_length=1)
    label: str = Field(min_length=1)
    icon: str = Field(min_length=1)
    color: str = Field(min_length=1)


class HabitLegendPatch(PatchModel):
    required_fields = frozenset({"icon_key", "label", "icon", "color"})

    icon_key: Optional[str] = Field(None, min_length=1)
    label: Optional[str] = Field(None, min_length=1)
    icon: Optional[str] = Field(None, min_length=1)
    color: Optional[str] = Field(None, min_length=1)


class AccountCreate(WireModel):
    name: str = Field(min_length=1)
    type: AccountType
    balance: Decimal = Field(Decimal("0"), max_digits=12, decimal_places=2)
    currency: Optional[str] = "USD"
    is_active: Optional[bool] = True


class AccountPatch(PatchModel):
    required_fields = frozenset({"name", "type", "balance"})

    name: Optional[str] = Field(None, min_length=1)
    type: Optional[AccountType] = None
    balance: Optional[Decimal] = Field(None, max_digits=12, decimal_places=2)
    currency: Optional[str] = None
    is_active: Optional[bool] = None


class TransactionCreate(WireModel):
    account_id: int
    amount: Decimal = Field(max_digits=12, decimal_places=2)
    type: TransactionType
    category: str = Field(min_length=1)
    description: Optional[str] = None
    date: dt.date


class TransactionPatch(PatchModel):
    required_fields = frozenset({"account_id", "amount", "type", "category", "date"})

    account_id: Optional[int] = None
    amount: Optional[Decimal] = Field(None, max_digits=12, decimal_places=2)
    type: Optional[TransactionType] = None
    category: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    date: Optional[dt.date] = None


class FinancialGoalCreate(WireModel):
    title: str = Field(min_length=1)
    target_amount: Decimal = Field(max_digits=12, decimal_places=2)
    current_amount: Optional[Decimal] = Field(Decimal("0"), max_digits=12, decimal_places=2)
    weekly_allocation: Optional[Decimal] = Field(None, max_digits=12, decimal_places=2)
    target_date: Optional[dt.date] = None
    is_active: Optional[bool] = True


class FinancialGoalPatch(PatchModel):
    required_fields = frozenset({"title", "target_amount"})

    title: Optional[str] = Field(None, min_length=1)
    target_amount: Optional[Decimal] = Field(None, max_digits=12, decimal_places=2)
    current_amount: Optional[Decimal] = Field(None, max_digits=12, decimal_places=2)
    weekly_allocation: Optional[Decimal] = Field(None, max_digits=12, decimal_places=2)
    target_date: Optional[dt.date] = None
    is_active: Optional[bool] = None


class HealthScoreCreate(WireModel):
    month: int = Field(ge=1, le=12)
    year: int = Field(ge=1)
    spiritual_score: Optional[int] = Field(1, ge=1, le=10)
    mental_score: Optional[int] = Field(1, ge=1, le=10)
    social_score: Optional[int] = Field(1, ge=1, le=10)
    physical_score: Optional[int] = Field(1, ge=1, le=10)
    financial_score: Optional[int] = Field(1, ge=1, le=10)
    notes: Optional[str] = None


class HealthScorePatch(PatchModel):
    required_fields = frozenset({"month", "year"})

    month: Optional[int] = Field(None, ge=1, le=12)
    year: Optional[int] = Field(None, ge=1)
    spiritual_score: Optional[int] = Field(None, ge=1, le=10)
    mental_score: Optional[int] = Field(None, ge=1, le=10)
    social_score: Optional[int] = Field(None, ge=1, le=10)
    physical_score: Optional[int] = Field(None, ge=1, le=10)
    financial_score: Optional[int] = Field(None, ge=1, le=10)
    notes: Optional[str] = None
