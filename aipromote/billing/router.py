"""Billing domain router."""

from fastapi import APIRouter, Depends
from sqlmodel import col, select

from aipromote.billing.models import SubscriptionPlan
from aipromote.billing.schemas import PlanList, PlanRead
from aipromote.core.constants import CommonResponses, Routes
from aipromote.core.deps import SessionDep
from aipromote.core.rate_limit import RateLimiters
from aipromote.models.responses import DataResponse

router = APIRouter(
    prefix=Routes.BILLING.prefix,
    tags=[Routes.BILLING.tag],
    responses={**CommonResponses.TOO_MANY_REQUESTS},
)


@router.get(
    "/plans",
    response_model=DataResponse[PlanList],
    dependencies=[Depends(RateLimiters.API)],
)
def list_plans(session: SessionDep):
    """List active subscription plans in display order."""
    plans = session.exec(
        select(SubscriptionPlan)
        .where(col(SubscriptionPlan.is_active).is_(True))
        .order_by(col(SubscriptionPlan.sort_order).asc())
    ).all()
    return DataResponse(
        data=PlanList(plans=[PlanRead.model_validate(plan) for plan in plans])
    )
