from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional, Sequence

from lendpay.domain.entities import Borrower, DraftBorrower
from lendpay.domain.ports import BorrowerGateway, BorrowerId


async def inline_io(fn: Callable[..., Any], *args: Any) -> Any:
    """Run a gateway call on the event loop thread (deterministic tests)."""
    return fn(*args)


def make_borrower(borrower_id: Any = "b1", name: str = "Bob", amount: Any = "500.00") -> Borrower:
    return Borrower.model_validate(
        {
            "id": borrower_id,
            "name": name,
            "email": f"{str(name).lower()}@x.com",
            "phone": "123",
            "loanAmount": amount,
        }
    )


class GatewayStub(BorrowerGateway):
    """Scripted gateway: queue results or exceptions per operation."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.list_results: List[Any] = []
        self.create_results: List[Any] = []
        self.onboard_results: List[Any] = []
        self.disburse_results: List[Any] = []

    @staticmethod
    def _next(queue: List[Any], default: Any) -> Any:
        result = queue.pop(0) if queue else default
        if isinstance(result, BaseException):
            raise result
        return result

    def list_borrowers(self) -> List[Borrower]:
        self.calls.append({"method": "list_borrowers"})
        return self._next(self.list_results, [])

    def create_borrower(self, draft: DraftBorrower) -> Borrower:
        self.calls.append({"method": "create_borrower", "draft": draft.model_copy()})
        return self._next(self.create_results, make_borrower("new", draft.name or "New"))

    def initiate_onboarding(self, borrower_id: BorrowerId) -> str:
        self.calls.append({"method": "initiate_onboarding", "borrower_id": borrower_id})
        return self._next(self.onboard_results, "https://processor.example/onboard/abc")

    def initiate_disbursement(self, borrower_id: BorrowerId, amount: Decimal) -> None:
        self.calls.append({"method": "initiate_disbursement", "borrower_id": borrower_id, "amount": amount})
        return self._next(self.disburse_results, None)

    def methods(self) -> List[str]:
        return [call["method"] for call in self.calls]


class FakeTimers:
    """TimerPort double; tests fire pending callbacks explicitly."""

    def __init__(self) -> None:
        self.pending: Dict[str, Callable[[], None]] = {}
        self.delays: Dict[str, int] = {}
        self.fired_stale: List[Callable[[], None]] = []

    def schedule(self, key: str, delay_ms: int, callback: Callable[[], None]) -> None:
        previous = self.pending.get(key)
        if previous is not None:
            self.fired_stale.append(previous)
        self.pending[key] = callback
        self.delays[key] = delay_ms

    def cancel(self, key: str) -> None:
        callback = self.pending.pop(key, None)
        if callback is not None:
            self.fired_stale.append(callback)

    def fire(self, key: str) -> None:
        callback = self.pending.pop(key)
        callback()


class ResponseStub:
    def __init__(self, payload: Any = None, status_code: int = 200, text: Optional[str] = None) -> None:
        self._payload = payload
        self.status_code = status_code
        self.text = text if text is not None else str(payload)

    def json(self) -> Any:
        if isinstance(self._payload, BaseException):
            raise self._payload
        return self._payload


class SessionStub:
    """Stands in for ``requests.Session`` inside ``JsonSession``."""

    def __init__(self, responses: Sequence[Any]) -> None:
        self._responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def _respond(self, method: str, url: str, **kwargs: Any) -> ResponseStub:
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self._responses:
            raise RuntimeError("No stub response configured")
        resp = self._responses.pop(0)
        if isinstance(resp, BaseException):
            raise resp
        return resp

    def get(self, url: str, **kwargs: Any) -> ResponseStub:
        return self._respond("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> ResponseStub:
        return self._respond("POST", url, **kwargs)


__all__ = [
    "FakeTimers",
    "GatewayStub",
    "ResponseStub",
    "SessionStub",
    "inline_io",
    "make_borrower",
]
