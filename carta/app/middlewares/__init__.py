from .request_id import RequestIdMiddleware, request_id_ctx, tenant_ctx

__all__ = ["RequestIdMiddleware", "request_id_ctx", "tenant_ctx"]
