"""Display helpers for money values shown in borrower views."""

from __future__ import annotations

from typing import Any

from lendpay.domain.entities import coerce_amount


def format_currency(amount: Any) -> str:
    """Render an amount as dollars with two fractional digits, e.g. ``$500.00``."""
    return f"${coerce_amount(amount)}"


__all__ = ["format_currency"]
