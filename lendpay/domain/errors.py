"""Domain-level error types for use-case and adapter mapping.

This module is the home for shared errors that must cross layer boundaries
without leaking transport-specific exception details. Adapters raise the
``GatewayError`` family; use cases translate them into ``UseCaseError``
(see :mod:`lendpay.domain.ports`) before anything reaches a viewmodel.
"""

from __future__ import annotations

from typing import Any, Optional


class GatewayError(RuntimeError):
    """Base class for Borrower Gateway failures."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        hint: Optional[str] = None,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.hint = hint
        self.payload = payload
        self.context = context


class TransportError(GatewayError):
    """Network failure, timeout, or an HTTP status outside the semantic set."""


class ValidationError(GatewayError):
    """Backend rejected a create payload (for example blank fields)."""


class DomainError(GatewayError):
    """Backend rejected a payment request on business grounds.

    Typical causes are insufficient platform balance or a borrower that has
    not finished processor onboarding.
    """


class SchemaError(GatewayError):
    """Response body could not be parsed into the expected schema."""


class ConfigError(ValueError):
    """Startup configuration is missing or malformed."""


__all__ = [
    "ConfigError",
    "DomainError",
    "GatewayError",
    "SchemaError",
    "TransportError",
    "ValidationError",
]
