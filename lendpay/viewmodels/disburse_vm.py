"""Disbursement controller: borrower selection, amount, eligibility gate.

Call context:
    ``lendpay.web_ui.main`` builds one ``DisburseVM`` per page visit and
    binds the borrower select, the amount input and the "Disburse Funds"
    button (enabled only while ``can_disburse`` holds).
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional

from lendpay.domain.entities import Borrower, DisbursementRequest, coerce_amount
from lendpay.domain.ports import BorrowerId, RunIO, UseCaseError
from lendpay.usecases.disburse_funds import DisburseFunds
from lendpay.usecases.load_borrowers import LoadBorrowers

from .form_state import FormState
from .notification_vm import NotificationVM

LOGGER = logging.getLogger(__name__)

DISBURSED_MESSAGE = "Funds disbursed successfully!"


class DisburseVM:
    """State and commands for the disburse-funds view."""

    def __init__(
        self,
        *,
        load_borrowers: LoadBorrowers,
        disburse_funds: DisburseFunds,
        notifications: Optional[NotificationVM] = None,
        run_io: RunIO = asyncio.to_thread,
        on_changed: Optional[Callable[[], None]] = None,
    ) -> None:
        self.uc_load = load_borrowers
        self.uc_disburse = disburse_funds
        self.notifications = notifications or NotificationVM()
        self.run_io = run_io
        self.on_changed = on_changed

        self.borrowers: List[Borrower] = []
        self.request = DisbursementRequest()
        self.form = FormState()

    async def load(self) -> bool:
        try:
            borrowers = await self.run_io(self.uc_load)
        except UseCaseError as err:
            self.notifications.error(err.message)
            self._changed()
            return False
        self.borrowers = list(borrowers)
        selected = self.request.selected_borrower_id
        if selected != "" and not self._is_cached(selected):
            LOGGER.debug("dropping selection %r: no longer listed", selected)
            self.request.selected_borrower_id = ""
        self._changed()
        return True

    def select_borrower(self, borrower_id: Optional[BorrowerId]) -> None:
        self.request.selected_borrower_id = "" if borrower_id is None else borrower_id

    def set_amount(self, value: Any) -> None:
        self.request.amount = coerce_amount(value)

    @property
    def can_disburse(self) -> bool:
        """Selected borrower is in the cached list, amount is positive, nothing in flight."""
        if self.form.busy or not self.request.is_ready():
            return False
        return self._is_cached(self.request.selected_borrower_id)

    def _is_cached(self, borrower_id: BorrowerId) -> bool:
        return any(borrower.id == borrower_id for borrower in self.borrowers)

    def borrower_options(self) -> Dict[BorrowerId, str]:
        """Select-widget options in backend order."""
        return {borrower.id: borrower.name for borrower in self.borrowers}

    async def disburse(self) -> bool:
        """Send the disbursement; a no-op returning ``False`` while gated."""
        if not self.can_disburse:
            LOGGER.debug("disburse ignored: gate closed or already in flight")
            return False
        self.form.begin()
        self._changed()
        try:
            await self.run_io(self.uc_disburse, self.request.model_copy())
        except UseCaseError as err:
            self.form.fail(err.code)
            self.notifications.error(err.message)
            self._changed()
            return False
        self.form.succeed()
        self.request = DisbursementRequest()
        self.notifications.success(DISBURSED_MESSAGE)
        self._changed()
        return True

    def _changed(self) -> None:
        if self.on_changed is not None:
            self.on_changed()


__all__ = ["DISBURSED_MESSAGE", "DisburseVM"]
