import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

# Context variables read by the log filter
request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
tenant_ctx: ContextVar[str | None] = ContextVar("tenant", default=None)

RESTAURANT_PATH_RE = re.compile(r"^/api/restaurants/([^/]+)")


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tag every request with a request id and the restaurant slug it targets."""

    async def dispatch(self, request: Request, call_next):
        req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        match = RESTAURANT_PATH_RE.match(request.url.path)
        req_token = request_id_ctx.set(req_id)
        tenant_token = tenant_ctx.set(match.group(1) if match else None)
        request.state.request_id = req_id
        try:
            response = await call_next(request)
        finally:
            tenant_ctx.reset(tenant_token)
            request_id_ctx.reset(req_token)
        response.headers["X-Request-ID"] = req_id
        return response
