"""Rate limiting middleware."""

from __future__ import annotations

import logging
import time
from ipaddress import ip_address, ip_network

import redis.asyncio as aioredis
from astrocritics.config import get_settings
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REDIS_STATE_KEY = "_rate_limit_redis"

_TRUSTED_PROXY_NETWORKS = (
    ip_network("127.0.0.0/8"),
    ip_network("10.0.0.0/8"),
    ip_network("172.16.0.0/12"),
    ip_network("192.168.0.0/16"),
    ip_network("::1/128"),
    ip_network("fc00::/7"),
)

# GET /v1/chart is a liveness probe for the chart route
_EXEMPT_PATHS = {
    "/v1/chart",
}

_CHAT_PATH_PREFIX = "/v1/chat"

_RATE_LIMITED = '{"detail":"Rate limit exceeded"}'


def _is_valid_ip(value: str) -> bool:
    try:
        ip_address(value)
    except ValueError:
        return False
    return True


def _is_trusted_proxy_host(host: str) -> bool:
    if not host:
        return False
    if host == "testclient":
        return True
    try:
        addr = ip_address(host)
    except ValueError:
        return False
    return any(addr in net for net in _TRUSTED_PROXY_NETWORKS)


def _extract_forwarded_client_ip(x_forwarded_for: str) -> str | None:
    # Right-to-left: the nearest address not belonging to a trusted proxy wins
    candidates = [part.strip() for part in x_forwarded_for.split(",") if part.strip()]
    valid = [candidate for candidate in candidates if _is_valid_ip(candidate)]
    for candidate in reversed(valid):
        if not _is_trusted_proxy_host(candidate):
            return candidate
    return valid[-1] if valid else None


def _resolve_client_ip(request: Request) -> str:
    remote_host = request.client.host if request.client else "unknown"
    if _is_trusted_proxy_host(remote_host):
        forwarded_ip = _extract_forwarded_client_ip(request.headers.get("x-forwarded-for", ""))
        if forwarded_ip:
            return forwarded_ip
    return remote_host


def _is_chat_path(path: str) -> bool:
    return path == _CHAT_PATH_PREFIX or path.startswith(_CHAT_PATH_PREFIX + "/")


def _hour_bucket() -> int:
    return int(time.time() // 3600)


class RateLimitMiddleware(BaseHTTPMiddleware):
    async def _get_redis_client(self, request: Request):
        redis_client = getattr(request.app.state, REDIS_STATE_KEY, None)
        if redis_client is None:
            redis_client = aioredis.from_url(get_settings().redis_url)
            setattr(request.app.state, REDIS_STATE_KEY, redis_client)
        return redis_client

    async def _exceeded(self, request: Request, key: str, limit: int) -> bool:
        r = await self._get_redis_client(request)
        count = await r.incr(key)
        if count == 1:
            await r.expire(key, 3600)
        return count > limit

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if not path.startswith("/v1/"):
            return await call_next(request)
        if request.method == "GET" and path in _EXEMPT_PATHS:
            return await call_next(request)
        settings = get_settings()
        client_ip = _resolve_client_ip(request)
        bucket = _hour_bucket()

        # Chat has its own lower ceiling
        if _is_chat_path(path) and settings.chat_rate_limit_per_hour > 0:
            try:
                if await self._exceeded(
                    request, f"ratelimit:chat:{client_ip}:{bucket}", settings.chat_rate_limit_per_hour
                ):
                    return Response(content=_RATE_LIMITED, status_code=429, media_type="application/json")
            except Exception as e:
                logger.warning("Chat rate limit check failed: %s", e)

        if settings.rate_limit_per_hour <= 0:
            return await call_next(request)
        try:
            if await self._exceeded(request, f"ratelimit:{client_ip}:{bucket}", settings.rate_limit_per_hour):
                return Response(content=_RATE_LIMITED, status_code=429, media_type="application/json")
        except Exception as e:
            logger.warning("Rate limit check failed: %s", e)
        return await call_next(request)
