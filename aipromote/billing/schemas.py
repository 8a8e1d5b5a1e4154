"""Billing domain schemas."""

import uuid
from typing import Any

from pydantic import BaseModel
from sqlmodel import SQLModel


class PlanRead(SQLModel):
    """Public representation of a subscription plan."""

    id: uuid.UUID
    name: str
    display_name: str
    description: str | None
    price_monthly: int
    price_yearly: int | None
    stripe_price_id: str | None
    limits: dict[str, Any]
    features: list[str]
    is_active: bool
    sort_order: int


class PlanList(BaseModel):
    plans: list[PlanRead]
