"""
App-wide constants for route configuration.

This module provides a single source of truth for route prefixes, tags,
and common response definitions for API routes.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from aipromote.models.responses import ErrorResponse

API_PREFIX = "/api"


@dataclass(frozen=True)
class RouteConfig:
    """Configuration for a route group."""

    prefix: str
    tag: str


class Routes:
    """Route configurations for all API endpoints (mounted under API_PREFIX)."""

    AUTH = RouteConfig(prefix="/auth", tag="auth")
    BILLING = RouteConfig(prefix="/billing", tag="billing")
    USER = RouteConfig(prefix="/users", tag="users")
    HEALTH = RouteConfig(prefix="/health", tag="health")


# Common response definitions for reuse across routers
class CommonResponses:
    """Standard HTTP error response definitions for OpenAPI documentation."""

    BAD_REQUEST: dict[int | str, dict[str, Any]] = {
        400: {"model": ErrorResponse, "description": "Invalid request data"}
    }
    UNAUTHORIZED: dict[int | str, dict[str, Any]] = {
        401: {
            "model": ErrorResponse,
            "description": "Missing, malformed or invalid bearer token",
        }
    }
    FORBIDDEN: dict[int | str, dict[str, Any]] = {
        403: {"model": ErrorResponse, "description": "Insufficient permissions"}
    }
    NOT_FOUND: dict[int | str, dict[str, Any]] = {
        404: {"model": ErrorResponse, "description": "Resource not found"}
    }
    CONFLICT: dict[int | str, dict[str, Any]] = {
        409: {"model": ErrorResponse, "description": "Resource already exists"}
    }
    TOO_MANY_REQUESTS: dict[int | str, dict[str, Any]] = {
        429: {"model": ErrorResponse, "description": "Rate limit exceeded"}
    }


# HTML email templates
EmailTemplatesDir = Path(__file__).parent.parent / "templates" / "emails"

JinjaEmailTemplatesEnv = Environment(
    loader=FileSystemLoader(str(EmailTemplatesDir)),
    autoescape=select_autoescape(["html", "xml"]),
)
