"""Translate gateway errors into user-facing UseCaseError instances."""

from __future__ import annotations

import logging
from typing import Optional

from lendpay.domain.errors import GatewayError
from lendpay.domain.ports import UseCaseError


def map_gateway_error(
    exc: Exception,
    *,
    code: str,
    message: str,
    logger: Optional[logging.Logger] = None,
    action: str = "",
) -> UseCaseError:
    """Collapse any gateway failure into a fixed, action-specific error.

    The user-facing message never carries backend detail. The diagnostic
    detail (status, context, payload hint) goes to ``logger`` instead.

    Args:
        exc: Exception raised by the gateway call.
        code: Stable error code for the action.
        message: Fixed operator-facing message for the action.
        logger: Developer log channel; defaults to this module's logger.
        action: Short description used in the log line, e.g. ``fetching borrowers``.

    Returns:
        UseCaseError: ``exc`` unchanged when it already is one, otherwise a
        new error carrying ``code`` and ``message``.
    """
    if isinstance(exc, UseCaseError):
        return exc
    log = logger or logging.getLogger(__name__)
    label = action or code.lower()
    if isinstance(exc, GatewayError):
        log.error(
            "Error %s: %s [%s status=%s hint=%s]",
            label,
            exc,
            type(exc).__name__,
            exc.status,
            exc.hint,
        )
    else:
        log.exception("Error %s: unexpected %s", label, type(exc).__name__, exc_info=exc)
    return UseCaseError(code, message)


__all__ = ["map_gateway_error"]
