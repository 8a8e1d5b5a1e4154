"""Central API router aggregating all domain routers under /api."""

from fastapi import APIRouter

from aipromote.auth.router import router as auth_router
from aipromote.billing.router import router as billing_router
from aipromote.core.constants import API_PREFIX
from aipromote.health.router import router as health_router
from aipromote.user.router import router as user_router

api_router = APIRouter(prefix=API_PREFIX)

api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(billing_router)
api_router.include_router(user_router)
