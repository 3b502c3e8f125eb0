from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Set
from uuid import uuid4

from lendpay.domain.entities import Borrower, DraftBorrower, coerce_amount
from lendpay.domain.errors import DomainError, TransportError, ValidationError
from lendpay.domain.ports import BorrowerGateway, BorrowerId


@dataclass
class BorrowerGatewayMock(BorrowerGateway):
    """Offline substitute for ``BorrowerRestAdapter`` with deterministic responses.

    Borrowers are kept in insertion order. Onboarding marks the borrower as
    onboarded immediately and returns a fake processor URL; disbursement
    requires an onboarded borrower and enough platform balance.
    """

    balance: Decimal = Decimal("100000")
    redirect_base: str = "https://processor.example/onboard"
    _borrowers: Dict[str, Borrower] = field(default_factory=dict)
    _onboarded: Set[str] = field(default_factory=set)
    disbursements: List[Dict[str, object]] = field(default_factory=list)

    # ---------- BorrowerGateway ----------

    def list_borrowers(self) -> List[Borrower]:
        return list(self._borrowers.values())

    def create_borrower(self, draft: DraftBorrower) -> Borrower:
        payload = draft.to_payload()
        blank = [key for key in ("name", "email", "phone") if not str(payload[key]).strip()]
        if blank:
            raise ValidationError(
                f"create_borrower: missing {', '.join(blank)}",
                status=400,
                payload={"errors": blank},
                context="create_borrower",
            )
        if not isinstance(payload["loanAmount"], (int, float)) or payload["loanAmount"] < 0:
            raise ValidationError(
                "create_borrower: loanAmount must be a non-negative number",
                status=400,
                context="create_borrower",
            )
        borrower = Borrower(
            id=uuid4().hex[:8],
            name=payload["name"],
            email=payload["email"],
            phone=payload["phone"],
            loan_amount=coerce_amount(payload["loanAmount"]),
        )
        self._borrowers[str(borrower.id)] = borrower
        return borrower

    def initiate_onboarding(self, borrower_id: BorrowerId) -> str:
        key = self._require(borrower_id, "onboard")
        self._onboarded.add(key)
        return f"{self.redirect_base}/{key}"

    def initiate_disbursement(self, borrower_id: BorrowerId, amount: Decimal) -> None:
        key = self._require(borrower_id, "disburse")
        value = coerce_amount(amount)
        if value <= 0:
            raise DomainError("disburse: amount must be positive", status=422, context="disburse")
        if key not in self._onboarded:
            raise DomainError(f"disburse: borrower {key} is not onboarded", status=409, context="disburse")
        if value > self.balance:
            raise DomainError("disburse: insufficient funds", status=402, context="disburse")
        self.balance -= value
        self.disbursements.append({"borrowerId": borrower_id, "amount": value})

    # ---------- helpers ----------

    def _require(self, borrower_id: BorrowerId, ctx: str) -> str:
        key = str(borrower_id)
        if key not in self._borrowers:
            raise TransportError(f"{ctx}: unknown borrower {key} (HTTP 404)", status=404, context=ctx)
        return key
