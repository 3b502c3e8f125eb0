from __future__ import annotations

"""Domain value objects shared across adapters, use-cases, and view models."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Literal, Optional, Union
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

NotificationType = Literal["success", "error"]
ZERO = Decimal("0")
CENT = Decimal("0.01")
# Amounts at or above this are treated as invalid input.
MAX_AMOUNT = Decimal("1e12")


def _parse_amount(value: Any) -> Optional[Decimal]:
    """Return ``value`` as a cent-quantized ``Decimal`` or ``None`` if unusable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        amount = value
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            amount = Decimal(text)
        except ArithmeticError:
            return None
    if not amount.is_finite() or amount.copy_abs() >= MAX_AMOUNT:
        return None
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def coerce_amount(value: Any) -> Decimal:
    """Convert raw form input into a cent-quantized ``Decimal`` without raising.

    Blank, non-numeric, non-finite and out-of-range input collapses to ``0``
    so that it fails the positivity checks downstream instead of erroring in
    the view. Sub-cent values round to the nearest cent, so ``0.001`` is not
    a positive amount.
    """
    amount = _parse_amount(value)
    return ZERO if amount is None else amount


def json_number(value: Decimal) -> Union[int, float]:
    """Render a decimal as the JSON number the backend expects."""
    amount = coerce_amount(value)
    if amount == amount.to_integral_value():
        return int(amount)
    return float(amount)


class Borrower(BaseModel):
    """Loan recipient record owned by the backend and cached by the client."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: Union[int, str]
    name: str = ""
    email: str = ""
    phone: str = ""
    loan_amount: Decimal = Field(default=ZERO, alias="loanAmount", ge=0)

    @field_validator("name", "email", "phone", mode="before")
    @classmethod
    def _none_as_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("id")
    @classmethod
    def _id_not_blank(cls, value: Union[int, str]) -> Union[int, str]:
        if isinstance(value, str) and not value.strip():
            raise ValueError("Borrower id must be a non-empty string.")
        return value


class DraftBorrower(BaseModel):
    """Client-only staging record for a borrower that does not exist yet.

    Assignments are not validated: ``loan_amount`` keeps whatever the operator
    typed (a number or raw text) until the draft is submitted.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    email: str = ""
    phone: str = ""
    loan_amount: Union[Decimal, str] = Field(default=ZERO, alias="loanAmount")

    def to_payload(self) -> Dict[str, Any]:
        """Serialize for ``POST /borrowers``.

        Numeric amount text is sent as a number; anything else is passed
        through unchanged so the backend can reject it.
        """
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "loanAmount": _draft_amount(self.loan_amount),
        }


def _draft_amount(raw: Union[Decimal, str, Any]) -> Any:
    if isinstance(raw, (Decimal, int, float)) and not isinstance(raw, bool):
        return json_number(coerce_amount(raw))
    amount = _parse_amount(raw)
    if amount is None:
        return raw
    return json_number(amount)


class DisbursementRequest(BaseModel):
    """Client-only form state for a fund transfer to one borrower."""

    selected_borrower_id: Union[int, str] = ""
    amount: Decimal = ZERO

    @field_validator("amount", mode="before")
    @classmethod
    def _cents(cls, value: Any) -> Decimal:
        return coerce_amount(value)

    def is_ready(self) -> bool:
        """Return ``True`` when a borrower is selected and the amount is positive.

        The amount is compared after rounding to cents, which is the value
        that goes over the wire.
        """
        selected = self.selected_borrower_id
        if selected is None or (isinstance(selected, str) and not selected.strip()):
            return False
        return coerce_amount(self.amount) > 0


class OnboardingLink(BaseModel):
    """Redirect target returned by ``POST /payments/onboard``."""

    url: str

    @field_validator("url")
    @classmethod
    def _absolute_http_url(cls, value: str) -> str:
        text = value.strip()
        parsed = urlparse(text)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("Onboarding redirect must be an absolute http(s) URL.")
        return text


@dataclass(frozen=True)
class Notification:
    """Single-slot status message shown to the operator."""

    open: bool = False
    message: str = ""
    type: NotificationType = "success"


__all__ = [
    "MAX_AMOUNT",
    "Borrower",
    "DisbursementRequest",
    "DraftBorrower",
    "Notification",
    "NotificationType",
    "OnboardingLink",
    "ZERO",
    "coerce_amount",
    "json_number",
]
