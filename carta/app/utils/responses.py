from typing import Any, Dict, Iterable, Mapping


def ok(data: Any) -> Dict[str, Any]:
    """Return a success envelope."""
    return {"ok": True, "data": data}


def err(
    code: int | str,
    message: str,
    details: Any = None,
    hint: str | None = None,
) -> Dict[str, Any]:
    """Return an error envelope."""
    from ..middlewares.request_id import request_id_ctx

    error: Dict[str, Any] = {"code": code, "message": message}
    if hint:
        error["hint"] = hint
    if details:
        error["details"] = details

    return {"ok": False, "request_id": request_id_ctx.get(None), "error": error}


def validation_details(errors: Iterable[Mapping[str, Any]]) -> list[Dict[str, Any]]:
    """Reduce pydantic error entries to ``field``/``message`` pairs."""

    return [
        {
            "field": ".".join(str(part) for part in e.get("loc", ()) if part != "body"),
            "message": e.get("msg", ""),
        }
        for e in errors
    ]
