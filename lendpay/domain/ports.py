from __future__ import annotations

from decimal import Decimal
from typing import Any, Awaitable, Callable, List, Protocol, Union

from .entities import Borrower, DraftBorrower

BorrowerId = Union[int, str]
NavigateFn = Callable[[str], None]
RunIO = Callable[..., Awaitable[Any]]


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class BorrowerGateway(Protocol):
    """Borrower and payment operations against the lending backend.

    Pure request/response facade: no retries and no caching. Failures are
    raised as ``lendpay.domain.errors.GatewayError`` subclasses.
    """

    def list_borrowers(self) -> List[Borrower]: ...
    def create_borrower(self, draft: DraftBorrower) -> Borrower: ...
    def initiate_onboarding(self, borrower_id: BorrowerId) -> str: ...  # redirect URL
    def initiate_disbursement(self, borrower_id: BorrowerId, amount: Decimal) -> None: ...


class TimerPort(Protocol):
    """One-shot timers keyed by channel, backed by the UI event loop."""

    def schedule(self, key: str, delay_ms: int, callback: Callable[[], None]) -> None: ...
    def cancel(self, key: str) -> None: ...
