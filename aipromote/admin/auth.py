import hmac
import logging

from sqladmin.authentication import AuthenticationBackend
from starlette.requests import Request

from aipromote.core.settings import get_settings

logger = logging.getLogger(__name__)


class AdminAuth(AuthenticationBackend):
    """SQLAdmin login against the configured admin credentials.

    The admin panel is separate from API bearer tokens; it keeps its own
    Starlette session signed with SESSION_SECRET_KEY.
    """

    def __init__(self) -> None:
        settings = get_settings()
        super().__init__(secret_key=settings.session_secret_key)

    async def login(self, request: Request) -> bool:
        form = await request.form()
        username = str(form.get("username", form.get("email", ""))).strip()
        password = str(form.get("password", ""))

        settings = get_settings()
        ok = hmac.compare_digest(
            username.encode(), settings.admin_username.encode()
        ) and hmac.compare_digest(password.encode(), settings.admin_password.encode())
        if ok:
            request.session["admin_user"] = username
        else:
            logger.warning("Failed admin login for %r", username)
        return ok

    async def logout(self, request: Request) -> bool:
        request.session.clear()
        return True

    async def authenticate(self, request: Request) -> bool:
        return bool(request.session.get("admin_user"))
