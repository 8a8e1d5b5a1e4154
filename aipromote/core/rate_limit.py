"""Fixed-window request rate limiting.

A ``RateLimiter`` is a FastAPI dependency attached to a route::

    @router.post("/signin", dependencies=[Depends(RateLimiters.AUTH)])

Route-level dependencies are resolved before the request body is validated,
so a throttled client gets a 429 without any business logic running. A body
that is not valid JSON is rejected by FastAPI before the limiter counts it.

Counters live in a ``CounterStore``. The bundled ``MemoryCounterStore`` keeps
them in process memory, which is correct for a single worker. Each window
starts at the first request for a key and lasts ``window_seconds``.
"""

import logging
import math
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated, Protocol

from fastapi import Depends, Request, Response

from aipromote.auth.exceptions import AuthenticationError
from aipromote.auth.tokens import extract_bearer_token, verify_token
from aipromote.core.exceptions import RateLimitError
from aipromote.core.settings import Settings, get_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateLimitPolicy:
    """A named request quota."""

    name: str
    window_seconds: int
    max_requests: int
    message: str = "Too many requests, please try again later."


@dataclass(frozen=True)
class WindowState:
    """Outcome of counting one request against a window."""

    allowed: bool
    count: int
    reset_at: float


class CounterStore(Protocol):
    def consume(self, key: str, limit: int, window_seconds: int) -> WindowState:
        """Count one request for ``key`` unless the window is exhausted."""
        ...

    def clear(self) -> None:
        ...


class MemoryCounterStore:
    """Thread-safe in-process counter store."""

    # Expired windows are swept once the table grows past this size.
    SWEEP_THRESHOLD = 10_000

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._windows: dict[str, tuple[int, float]] = {}
        self._lock = threading.Lock()

    def consume(self, key: str, limit: int, window_seconds: int) -> WindowState:
        with self._lock:
            now = self._clock()
            count, reset_at = self._windows.get(key, (0, 0.0))
            if now >= reset_at:
                count, reset_at = 0, now + window_seconds

            if count >= limit:
                return WindowState(allowed=False, count=count, reset_at=reset_at)

            count += 1
            self._windows[key] = (count, reset_at)
            if len(self._windows) > self.SWEEP_THRESHOLD:
                self._sweep(now)
            return WindowState(allowed=True, count=count, reset_at=reset_at)

    def clear(self) -> None:
        with self._lock:
            self._windows.clear()

    def _sweep(self, now: float) -> None:
        expired = [k for k, (_, reset_at) in self._windows.items() if now >= reset_at]
        for key in expired:
            del self._windows[key]


default_store = MemoryCounterStore()


def client_identifier(request: Request, settings: Settings) -> str:
    """Identify the caller: verified bearer subject, then proxy IP, then peer IP.

    Only a token that verifies against the signing secret names a user;
    anything else falls back to the network address.
    """
    authorization = request.headers.get("authorization")
    if authorization:
        try:
            token = extract_bearer_token(authorization)
            principal = verify_token(
                token, settings.jwt_secret, settings.jwt_algorithm
            )
        except AuthenticationError:
            pass
        else:
            return f"user:{principal.id}"

    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return f"ip:{first}"

    if request.client and request.client.host:
        return f"ip:{request.client.host}"
    return "ip:unknown"


def _endpoint(request: Request) -> str:
    return request.url.path.rstrip("/") or "/"


class RateLimiter:
    """FastAPI dependency enforcing a ``RateLimitPolicy``."""

    def __init__(
        self, policy: RateLimitPolicy, store: CounterStore | None = None
    ) -> None:
        self.policy = policy
        self.store = store if store is not None else default_store

    def __call__(
        self,
        request: Request,
        response: Response,
        settings: Annotated[Settings, Depends(get_settings)],
    ) -> None:
        if not settings.rate_limit_enabled:
            return

        policy = self.policy
        key = f"{policy.name}:{client_identifier(request, settings)}:{_endpoint(request)}"
        request.state.rate_limit_key = key

        try:
            state = self.store.consume(key, policy.max_requests, policy.window_seconds)
        except Exception:
            # Counter backend trouble must not take the API down with it.
            logger.warning(
                "Rate limit store failed; allowing request",
                exc_info=True,
                extra={"rate_limit_key": key},
            )
            return

        reset_at = math.ceil(state.reset_at)

        if not state.allowed:
            retry_after = max(0, math.ceil(state.reset_at - time.time()))
            logger.info(
                "Rate limit exceeded for %s",
                key,
                extra={"rate_limit_key": key, "path": request.url.path},
            )
            raise RateLimitError(
                policy.message,
                limit=policy.max_requests,
                reset_at=reset_at,
                retry_after=retry_after,
            )

        response.headers["X-RateLimit-Limit"] = str(policy.max_requests)
        response.headers["X-RateLimit-Remaining"] = str(
            max(0, policy.max_requests - state.count)
        )
        response.headers["X-RateLimit-Reset"] = str(reset_at)


class RateLimiters:
    """Named presets shared by the routers."""

    API = RateLimiter(
        RateLimitPolicy(name="api", window_seconds=15 * 60, max_requests=100)
    )
    AUTH = RateLimiter(
        RateLimitPolicy(
            name="auth",
            window_seconds=15 * 60,
            max_requests=5,
            message="Too many authentication attempts, please try again later.",
        )
    )
    PASSWORD_RESET = RateLimiter(
        RateLimitPolicy(
            name="password_reset",
            window_seconds=60 * 60,
            max_requests=3,
            message="Too many password reset requests, please try again later.",
        )
    )
