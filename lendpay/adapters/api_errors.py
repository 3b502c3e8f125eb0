"""Map non-2xx backend responses onto the gateway error family."""

from __future__ import annotations

from typing import Any, Optional, Type

from lendpay.domain.errors import GatewayError, TransportError

_DETAIL_KEYS = ("message", "error", "detail")
_HINT_KEYS = ("hint", "errors", "details")
_SNIPPET = 200


def raise_for_status(
    resp: Any,
    ctx: str,
    *,
    rejected: Type[GatewayError] = TransportError,
    rejected_statuses: tuple[int, ...] = (),
) -> None:
    """Raise the gateway error matching a non-2xx response.

    Statuses listed in ``rejected_statuses`` mean the backend understood the
    request and refused its content; they raise ``rejected``. Everything else
    is treated as a transport-level failure.
    """
    status = int(getattr(resp, "status_code", 0) or 0)
    if 200 <= status < 300:
        return
    payload = _error_payload(resp)
    detail = _error_detail(payload)
    message = f"{ctx}: {detail} (HTTP {status})" if detail else f"{ctx}: HTTP {status}"
    error_cls = rejected if status in rejected_statuses else TransportError
    raise error_cls(message, status=status, hint=_error_hint(payload), payload=payload, context=ctx)


def _error_payload(resp: Any) -> Any:
    try:
        return resp.json()
    except ValueError:
        return (getattr(resp, "text", "") or "")[:_SNIPPET] or None


def _error_detail(payload: Any) -> Optional[str]:
    if isinstance(payload, dict):
        payload = next((payload[k] for k in _DETAIL_KEYS if isinstance(payload.get(k), str)), None)
    if isinstance(payload, str) and payload.strip():
        return payload.strip()[:_SNIPPET]
    return None


def _error_hint(payload: Any) -> Optional[str]:
    """Field-level reasons (``{"errors": ["name is required"]}``) joined for the log."""
    if not isinstance(payload, dict):
        return None
    for key in _HINT_KEYS:
        value = payload.get(key)
        if isinstance(value, str):
            value = [value]
        if isinstance(value, list):
            text = "; ".join(str(item).strip() for item in value if str(item).strip())
            if text:
                return text[:_SNIPPET]
    return None
