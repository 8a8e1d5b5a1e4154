"""Default subscription plans and an idempotent seeding routine.

Prices are in cents. Stripe price ids can be overridden per environment
with STRIPE_<PLAN>_PRICE_ID.
"""

import logging
import os
from typing import Any

from sqlmodel import Session, select

from aipromote.billing.models import SubscriptionPlan

logger = logging.getLogger(__name__)


def _price_id(plan: str, default: str) -> str:
    return os.getenv(f"STRIPE_{plan.upper()}_PRICE_ID", default)


DEFAULT_PLANS: list[dict[str, Any]] = [
    {
        "name": "Starter",
        "display_name": "Starter Plan",
        "description": (
            "Perfect for individual creators and small businesses just getting "
            "started with AI-powered social media marketing."
        ),
        "price_monthly": 2900,
        "price_yearly": 29000,
        "stripe_price_id": _price_id("starter", "price_starter_monthly"),
        "stripe_product_id": "prod_starter",
        "limits": {
            "posts_per_month": 50,
            "strategies": 2,
            "organizations": 1,
            "analytics": True,
            "team_members": 1,
            "auto_scheduling": True,
            "advanced_analytics": False,
            "priority_support": False,
            "custom_integrations": False,
        },
        "features": [
            "50 AI-generated posts per month",
            "2 marketing strategies",
            "1 organization/brand",
            "Basic analytics",
            "Auto-scheduling",
            "Content calendar",
            "Email support",
        ],
        "is_active": True,
        "sort_order": 1,
    },
    {
        "name": "Growth",
        "display_name": "Growth Plan",
        "description": (
            "Ideal for growing businesses and marketing teams that need more "
            "content and advanced features."
        ),
        "price_monthly": 7900,
        "price_yearly": 79000,
        "stripe_price_id": _price_id("growth", "price_growth_monthly"),
        "stripe_product_id": "prod_growth",
        "limits": {
            "posts_per_month": 200,
            "strategies": 5,
            "organizations": 3,
            "analytics": True,
            "team_members": 3,
            "auto_scheduling": True,
            "advanced_analytics": True,
            "priority_support": True,
            "custom_integrations": False,
        },
        "features": [
            "200 AI-generated posts per month",
            "5 marketing strategies",
            "3 organizations/brands",
            "Advanced analytics & reporting",
            "Auto-scheduling with optimal timing",
            "Content calendar with collaboration",
            "Team collaboration (3 members)",
            "Priority email support",
            "A/B testing for content",
            "Custom content pillars",
        ],
        "is_active": True,
        "sort_order": 2,
    },
    {
        "name": "Scale",
        "display_name": "Scale Plan",
        "description": (
            "For large businesses and agencies that need unlimited content and "
            "premium features."
        ),
        "price_monthly": 19900,
        "price_yearly": 199000,
        "stripe_price_id": _price_id("scale", "price_scale_monthly"),
        "stripe_product_id": "prod_scale",
        "limits": {
            "posts_per_month": 1000,
            "strategies": 20,
            "organizations": 10,
            "analytics": True,
            "team_members": 10,
            "auto_scheduling": True,
            "advanced_analytics": True,
            "priority_support": True,
            "custom_integrations": True,
        },
        "features": [
            "1,000 AI-generated posts per month",
            "20 marketing strategies",
            "10 organizations/brands",
            "Advanced analytics & reporting",
            "Auto-scheduling with optimal timing",
            "Content calendar with collaboration",
            "Team collaboration (10 members)",
            "Priority support (phone + email)",
            "A/B testing for content",
            "Custom content pillars",
            "Custom integrations",
            "Dedicated account manager",
            "White-label options",
            "API access",
        ],
        "is_active": True,
        "sort_order": 3,
    },
]


def seed_plans(
    session: Session, plans: list[dict[str, Any]] | None = None
) -> list[SubscriptionPlan]:
    """Insert or update plans, matching existing rows by name."""
    seeded: list[SubscriptionPlan] = []
    for data in plans if plans is not None else DEFAULT_PLANS:
        plan = session.exec(
            select(SubscriptionPlan).where(SubscriptionPlan.name == data["name"])
        ).first()
        if plan is None:
            plan = SubscriptionPlan(**data)
            logger.info("Creating plan %s", data["name"])
        else:
            for key, value in data.items():
                setattr(plan, key, value)
            logger.info("Updating plan %s", data["name"])
        session.add(plan)
        seeded.append(plan)

    session.commit()
    for plan in seeded:
        session.refresh(plan)
    return seeded
