"""Tests for aipromote/admin/auth.py - SQLAdmin authentication."""

from unittest.mock import MagicMock

import pytest

from aipromote.admin.auth import AdminAuth
from aipromote.core.settings import get_settings


@pytest.fixture
def admin_auth():
    """Create AdminAuth instance."""
    return AdminAuth()


@pytest.fixture
def mock_request():
    """Create a mock Starlette request with session."""
    request = MagicMock()
    request.session = {}
    return request


def _form(data: dict[str, str]):
    async def mock_form():
        return data

    return mock_form


@pytest.mark.asyncio
async def test_admin_login_success(admin_auth, mock_request):
    """Test AdminAuth.login() with valid credentials returns True."""
    settings = get_settings()
    mock_request.form = _form(
        {"username": settings.admin_username, "password": settings.admin_password}
    )

    result = await admin_auth.login(mock_request)

    assert result is True
    assert mock_request.session["admin_user"] == settings.admin_username


@pytest.mark.asyncio
async def test_admin_login_with_email_field(admin_auth, mock_request):
    """Test AdminAuth.login() falls back to the email field."""
    settings = get_settings()
    mock_request.form = _form(
        {"email": settings.admin_username, "password": settings.admin_password}
    )

    assert await admin_auth.login(mock_request) is True


@pytest.mark.asyncio
async def test_admin_login_strips_whitespace(admin_auth, mock_request):
    """Test AdminAuth.login() strips whitespace from the username."""
    settings = get_settings()
    mock_request.form = _form(
        {
            "username": f"  {settings.admin_username}  ",
            "password": settings.admin_password,
        }
    )

    assert await admin_auth.login(mock_request) is True
    assert mock_request.session["admin_user"] == settings.admin_username


@pytest.mark.asyncio
async def test_admin_login_invalid_password(admin_auth, mock_request, caplog):
    """Test AdminAuth.login() with a wrong password returns False."""
    settings = get_settings()
    mock_request.form = _form(
        {"username": settings.admin_username, "password": "wrong-password"}
    )

    result = await admin_auth.login(mock_request)

    assert result is False
    assert "admin_user" not in mock_request.session
    assert "Failed admin login" in caplog.text


@pytest.mark.asyncio
async def test_admin_login_invalid_username(admin_auth, mock_request):
    settings = get_settings()
    mock_request.form = _form(
        {"username": "someone-else", "password": settings.admin_password}
    )

    assert await admin_auth.login(mock_request) is False


@pytest.mark.asyncio
async def test_admin_logout(admin_auth, mock_request):
    """Test AdminAuth.logout() clears the session."""
    mock_request.session["admin_user"] = "admin"
    mock_request.session["other_data"] = "test"

    assert await admin_auth.logout(mock_request) is True
    assert mock_request.session == {}


@pytest.mark.asyncio
async def test_admin_authenticate(admin_auth, mock_request):
    """Test AdminAuth.authenticate() follows the session flag."""
    assert await admin_auth.authenticate(mock_request) is False

    mock_request.session["admin_user"] = "admin"

    assert await admin_auth.authenticate(mock_request) is True
