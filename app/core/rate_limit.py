from __future__ import annotations

from collections.abc import Callable
from typing import Final, ParamSpec, TypeVar, cast

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import settings

DEFAULT_RATE_LIMIT: Final[str] = "120/minute"
HEALTH_RATE_LIMIT: Final[str] = "300/minute"
CONTENT_RATE_LIMIT: Final[str] = "120/minute"
AFFILIATE_REDIRECT_RATE_LIMIT: Final[str] = "60/minute"

P = ParamSpec("P")
R = TypeVar("R")
StrOrCallableStr = str | Callable[..., str]
BoolCallable = Callable[..., bool]
ErrorMessageValue = str | Callable[..., str]


def rate_limit_ip_key(request: Request) -> str:
    return f"ip:{get_remote_address(request)}"


limiter = Limiter(
    key_func=rate_limit_ip_key,
    default_limits=[DEFAULT_RATE_LIMIT],
    storage_uri=settings.rate_limit_storage_url,
    in_memory_fallback_enabled=True,
    in_memory_fallback=[DEFAULT_RATE_LIMIT],
)


def limit(
    limit_value: StrOrCallableStr,
    *,
    key_func: Callable[..., str] | None = None,
    per_method: bool = False,
    methods: list[str] | None = None,
    error_message: ErrorMessageValue | None = None,
    exempt_when: BoolCallable | None = None,
    override_defaults: bool = True,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Typed wrapper for SlowAPI's limit decorator."""
    limit_decorator = cast(
        Callable[..., Callable[[Callable[P, R]], Callable[P, R]]],
        limiter.limit,
    )
    return limit_decorator(
        limit_value,
        key_func=key_func,
        per_method=per_method,
        methods=methods,
        error_message=error_message,
        exempt_when=exempt_when,
        override_defaults=override_defaults,
    )
