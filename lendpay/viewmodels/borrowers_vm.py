"""Borrower registry controller: list, draft creation, onboarding redirect.

Call context:
    ``lendpay.web_ui.main`` builds one ``BorrowersVM`` per page visit through
    ``AppController.build_borrowers_vm`` and binds the draft inputs, the
    "Add Borrower" button and each "Onboard to Stripe" button to it.

Concurrency:
    Gateway calls run through ``run_io`` and are the only suspension points.
    ``load`` is not serialized (the last response wins); ``submit`` is
    guarded by ``FormState`` and ``onboard`` by a per-borrower in-flight set.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, List, Optional, Set

from lendpay.domain.entities import Borrower, DraftBorrower
from lendpay.domain.ports import BorrowerId, NavigateFn, RunIO, UseCaseError
from lendpay.usecases.create_borrower import CreateBorrower
from lendpay.usecases.load_borrowers import LoadBorrowers
from lendpay.usecases.start_onboarding import StartOnboarding

from .form_state import FormState
from .formatting import format_currency
from .notification_vm import NotificationVM

LOGGER = logging.getLogger(__name__)

CREATED_MESSAGE = "Borrower added successfully"

DRAFT_FIELDS = {
    "name": "name",
    "email": "email",
    "phone": "phone",
    "loan_amount": "loan_amount",
    "loanAmount": "loan_amount",
}


class BorrowersVM:
    """State and commands for the borrower management view."""

    def __init__(
        self,
        *,
        load_borrowers: LoadBorrowers,
        create_borrower: CreateBorrower,
        start_onboarding: StartOnboarding,
        navigate: NavigateFn,
        notifications: Optional[NotificationVM] = None,
        run_io: RunIO = asyncio.to_thread,
        on_changed: Optional[Callable[[], None]] = None,
    ) -> None:
        self.uc_load = load_borrowers
        self.uc_create = create_borrower
        self.uc_onboard = start_onboarding
        self.navigate = navigate
        self.notifications = notifications or NotificationVM()
        self.run_io = run_io
        self.on_changed = on_changed

        self.borrowers: List[Borrower] = []
        self.draft = DraftBorrower()
        self.form = FormState()
        self.onboarding: Set[BorrowerId] = set()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    async def load(self) -> bool:
        """Replace the cached borrowers with a fresh list from the backend."""
        try:
            borrowers = await self.run_io(self.uc_load)
        except UseCaseError as err:
            self.notifications.error(err.message)
            self._changed()
            return False
        self.borrowers = list(borrowers)
        self._changed()
        return True

    def update_draft(self, field: str, value: Any) -> None:
        """Set one draft field verbatim; validation is left to the backend."""
        try:
            attr = DRAFT_FIELDS[field]
        except KeyError:
            raise KeyError(f"Unknown draft field: {field!r}") from None
        if attr != "loan_amount":
            value = "" if value is None else str(value)
        setattr(self.draft, attr, value)

    async def submit(self) -> bool:
        """Create a borrower from the current draft.

        Returns ``True`` on success. A call made while a previous submission
        is still in flight is ignored and returns ``False``.
        """
        if not self.form.begin():
            LOGGER.debug("submit ignored: create already in flight")
            return False
        self._changed()
        try:
            await self.run_io(self.uc_create, self.draft.model_copy())
        except UseCaseError as err:
            self.form.fail(err.code)
            self.notifications.error(err.message)
            self._changed()
            return False
        self.form.succeed()
        self.draft = DraftBorrower()
        self.notifications.success(CREATED_MESSAGE)
        self._changed()
        await self.load()
        return True

    async def onboard(self, borrower_id: BorrowerId) -> bool:
        """Request an onboarding link and hand it to the navigation port."""
        if borrower_id in self.onboarding:
            LOGGER.debug("onboard ignored: borrower %s already in flight", borrower_id)
            return False
        self.onboarding.add(borrower_id)
        try:
            url = await self.run_io(self.uc_onboard, borrower_id)
        except UseCaseError as err:
            self.notifications.error(err.message)
            self._changed()
            return False
        finally:
            self.onboarding.discard(borrower_id)
        LOGGER.info("Redirecting borrower %s to onboarding", borrower_id)
        self.navigate(url)
        return True

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------
    @staticmethod
    def loan_amount_label(borrower: Borrower) -> str:
        return format_currency(borrower.loan_amount)

    def _changed(self) -> None:
        if self.on_changed is not None:
            self.on_changed()


__all__ = ["BorrowersVM", "CREATED_MESSAGE"]
