from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqladmin import Admin

from aipromote.admin.auth import AdminAuth
from aipromote.admin.views import SubscriptionPlanAdmin, UserAdmin
from aipromote.core.cors import add_cors_middleware
from aipromote.core.email import init_resend
from aipromote.core.exception_handlers import register_exception_handlers
from aipromote.core.logging import configure_logging
from aipromote.core.request_logging import add_request_logging_middleware
from aipromote.core.settings import get_settings
from aipromote.db.engine import engine
from aipromote.router import api_router

configure_logging()


@asynccontextmanager
async def lifespan(_: FastAPI):
    init_resend()
    yield


app = FastAPI(
    title="AIPromote API",
    version=get_settings().app_version,
    lifespan=lifespan,
)

app.include_router(api_router)

add_request_logging_middleware(app)
add_cors_middleware(app)
register_exception_handlers(app)

# Mount SQLAdmin UI at /admin (SQLAdmin enables sessions via auth backend secret)
admin = Admin(
    app=app,
    engine=engine,
    authentication_backend=AdminAuth(),
)
admin.add_view(UserAdmin)
admin.add_view(SubscriptionPlanAdmin)
