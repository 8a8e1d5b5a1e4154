"""Billing domain models.

SQLModel table definition for SubscriptionPlan. Prices are stored in cents.
"""

import uuid
from typing import Any

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from aipromote.core.mixins import TimestampMixin


class SubscriptionPlan(TimestampMixin, SQLModel, table=True):
    """A billing tier offered on the pricing page."""

    __tablename__: str = "subscription_plans"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(unique=True, max_length=50)
    display_name: str = Field(max_length=100)
    description: str | None = Field(default=None)
    price_monthly: int = Field(ge=0)
    price_yearly: int | None = Field(default=None, ge=0)
    stripe_price_id: str | None = Field(default=None, unique=True, max_length=255)
    stripe_product_id: str | None = Field(default=None, unique=True, max_length=255)
    limits: dict[str, Any] = Field(
        default_factory=dict, sa_column=Column(JSON, nullable=False)
    )
    features: list[str] = Field(default_factory=list, sa_column=Column(JSON))
    is_active: bool = Field(default=True, index=True)
    sort_order: int = Field(default=0, index=True)
