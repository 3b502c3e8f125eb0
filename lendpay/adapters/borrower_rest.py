from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, List

import requests
from pydantic import ValidationError as SchemaValidationError

from lendpay.domain.entities import Borrower, DraftBorrower, OnboardingLink, json_number
from lendpay.domain.errors import DomainError, SchemaError, ValidationError
from lendpay.domain.ports import BorrowerGateway, BorrowerId

from .api_errors import raise_for_status
from .http_client import HttpConfig, JsonSession

LOGGER = logging.getLogger(__name__)

CREATE_REJECTED = (400, 409, 422)
DISBURSE_REJECTED = (400, 402, 409, 422)


class BorrowerRestAdapter(BorrowerGateway):
    """REST adapter for the borrower and payment endpoints of the backend."""

    def __init__(self, cfg: HttpConfig) -> None:
        self.cfg = cfg
        self.http = JsonSession(cfg)

    def list_borrowers(self) -> List[Borrower]:
        ctx = "list_borrowers"
        resp = self.http.get("/borrowers")
        raise_for_status(resp, ctx)
        data = self._json_any(resp, ctx)
        if not isinstance(data, list):
            raise SchemaError(f"{ctx}: expected list response", payload=data, context=ctx)
        try:
            return [Borrower.model_validate(entry) for entry in data]
        except SchemaValidationError as exc:
            raise SchemaError(f"{ctx}: {exc.error_count()} invalid borrower field(s)", payload=data, context=ctx) from exc

    def create_borrower(self, draft: DraftBorrower) -> Borrower:
        ctx = "create_borrower"
        resp = self.http.post("/borrowers", json_body=draft.to_payload())
        raise_for_status(resp, ctx, rejected=ValidationError, rejected_statuses=CREATE_REJECTED)
        data = self._json_any(resp, ctx)
        if not isinstance(data, dict):
            raise SchemaError(f"{ctx}: expected object response", payload=data, context=ctx)
        try:
            return Borrower.model_validate(data)
        except SchemaValidationError as exc:
            raise SchemaError(f"{ctx}: invalid borrower in response", payload=data, context=ctx) from exc

    def initiate_onboarding(self, borrower_id: BorrowerId) -> str:
        ctx = f"onboard[{borrower_id}]"
        resp = self.http.post("/payments/onboard", json_body={"borrowerId": borrower_id})
        raise_for_status(resp, ctx)
        raw = self._redirect_target(resp)
        if isinstance(raw, dict):
            raw = raw.get("url")
        if not isinstance(raw, str):
            raise SchemaError(f"{ctx}: expected redirect URL", payload=raw, context=ctx)
        try:
            return OnboardingLink(url=raw).url
        except SchemaValidationError as exc:
            raise SchemaError(f"{ctx}: invalid redirect URL", payload=raw, context=ctx) from exc

    def initiate_disbursement(self, borrower_id: BorrowerId, amount: Decimal) -> None:
        ctx = f"disburse[{borrower_id}]"
        body = {"borrowerId": borrower_id, "amount": json_number(amount)}
        resp = self.http.post("/payments/disburse", json_body=body)
        raise_for_status(resp, ctx, rejected=DomainError, rejected_statuses=DISBURSE_REJECTED)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _json_any(resp: requests.Response, ctx: str) -> Any:
        try:
            return resp.json()
        except ValueError as exc:
            snippet = (getattr(resp, "text", "") or "")[:400]
            raise SchemaError(f"{ctx}: invalid JSON response: {snippet}", context=ctx) from exc

    @staticmethod
    def _redirect_target(resp: requests.Response) -> Any:
        # The backend answers with a JSON string, but some deployments send
        # the URL as a plain text body.
        try:
            return resp.json()
        except ValueError:
            return (getattr(resp, "text", "") or "").strip()


__all__ = ["BorrowerRestAdapter"]
