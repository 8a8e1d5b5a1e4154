"""Transactional email via Resend.

Callers treat delivery as best-effort: failures are raised to them and they
decide whether to swallow and log.
"""

import logging
from urllib.parse import urlencode

import resend

from aipromote.core.constants import JinjaEmailTemplatesEnv
from aipromote.core.settings import get_settings

logger = logging.getLogger(__name__)


def _render_template(template_name: str, **context: str | int | None) -> str:
    """Render an HTML email template from templates/emails."""
    template = JinjaEmailTemplatesEnv.get_template(template_name)
    return template.render(**context)


def init_resend() -> None:
    """Initialize Resend with API key if available."""
    settings = get_settings()
    if not settings.resend_api_key:
        logger.info("RESEND_API_KEY not set; outgoing email is disabled")
        return
    resend.api_key = settings.resend_api_key


def build_client_url(path: str, token: str) -> str:
    """Build a frontend link carrying ``token`` as a query parameter."""
    settings = get_settings()
    return f"{settings.client_url.rstrip('/')}{path}?{urlencode({'token': token})}"


def _send(to_email: str, subject: str, html: str) -> bool:
    settings = get_settings()
    if not settings.resend_api_key:
        logger.info("Email delivery disabled; skipped %r to %s", subject, to_email)
        return False

    resend.Emails.send(
        {
            "from": f"noreply@{settings.app_domain}",
            "to": to_email,
            "subject": subject,
            "html": html,
        }
    )
    return True


def send_email_verification_email(
    to_email: str, token: str, *, name: str | None = None
) -> bool:
    """Send the account verification link.

    Returns:
        True if the message was handed to Resend, False if email is disabled.
    """
    settings = get_settings()
    verification_url = build_client_url("/auth/verify-email", token)
    logger.debug("Verification URL for %s: %s", to_email, verification_url)

    html_content = _render_template(
        "email-verification.html",
        name=name,
        verification_url=verification_url,
        expires_hours=settings.email_verification_expires_hours,
    )
    return _send(to_email, "Verify your AIPromote account", html_content)


def send_password_reset_email(
    to_email: str, token: str, *, name: str | None = None
) -> bool:
    """Send the password reset link.

    Returns:
        True if the message was handed to Resend, False if email is disabled.
    """
    settings = get_settings()
    reset_url = build_client_url("/auth/reset-password", token)
    logger.debug("Password reset URL for %s: %s", to_email, reset_url)

    html_content = _render_template(
        "password-reset.html",
        name=name,
        reset_url=reset_url,
        expires_minutes=settings.password_reset_expires_minutes,
    )
    return _send(to_email, "Reset your AIPromote password", html_content)
