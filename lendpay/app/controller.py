"""Adapter and use-case wiring for the web client runtime.

This module owns construction of the Borrower Gateway and the use-case
objects that depend on :class:`lendpay.app.config.ClientConfig`, and builds
one fresh controller viewmodel per page visit.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Optional

from ..adapters.borrower_mock import BorrowerGatewayMock
from ..adapters.borrower_rest import BorrowerRestAdapter
from ..domain.ports import BorrowerGateway, NavigateFn, RunIO, TimerPort
from ..usecases.create_borrower import CreateBorrower
from ..usecases.disburse_funds import DisburseFunds
from ..usecases.load_borrowers import LoadBorrowers
from ..usecases.start_onboarding import StartOnboarding
from ..viewmodels.borrowers_vm import BorrowersVM
from ..viewmodels.disburse_vm import DisburseVM
from ..viewmodels.notification_vm import NotificationVM
from .config import ClientConfig


class AppController:
    """Create the gateway and use cases once, viewmodels per page.

    Call chain:
        ``lendpay.web_ui.main`` creates one instance at startup and calls
        ``build_borrowers_vm`` / ``build_disburse_vm`` from each page handler.
        The two viewmodels never share borrower caches or notification slots.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        gateway: Optional[BorrowerGateway] = None,
        run_io: RunIO = asyncio.to_thread,
    ) -> None:
        """Initialize controller from validated configuration.

        Args:
            config: Startup configuration; its ``http_config`` is passed to
                the REST adapter constructor.
            gateway: Optional gateway override (tests). Demo mode uses the
                in-memory gateway.
            run_io: Coroutine runner for blocking gateway calls.
        """
        self.config = config
        self.run_io = run_io
        if gateway is not None:
            self.gateway = gateway
        elif config.demo:
            self.gateway = BorrowerGatewayMock()
        else:
            self.gateway = BorrowerRestAdapter(config.http_config())

        self.uc_load = LoadBorrowers(self.gateway)
        self.uc_create = CreateBorrower(self.gateway)
        self.uc_onboard = StartOnboarding(self.gateway)
        self.uc_disburse = DisburseFunds(self.gateway)

    def build_notifications(
        self,
        timers: Optional[TimerPort],
        *,
        key: str = "notification",
        on_changed: Optional[Callable[[], None]] = None,
    ) -> NotificationVM:
        return NotificationVM(
            timers,
            auto_hide_ms=self.config.notification_timeout_ms,
            key=key,
            on_changed=on_changed,
        )

    def build_borrowers_vm(
        self,
        *,
        navigate: NavigateFn,
        timers: Optional[TimerPort] = None,
        on_changed: Optional[Callable[[], None]] = None,
    ) -> BorrowersVM:
        return BorrowersVM(
            load_borrowers=self.uc_load,
            create_borrower=self.uc_create,
            start_onboarding=self.uc_onboard,
            navigate=navigate,
            notifications=self.build_notifications(timers, key="borrowers", on_changed=on_changed),
            run_io=self.run_io,
            on_changed=on_changed,
        )

    def build_disburse_vm(
        self,
        *,
        timers: Optional[TimerPort] = None,
        on_changed: Optional[Callable[[], None]] = None,
    ) -> DisburseVM:
        return DisburseVM(
            load_borrowers=self.uc_load,
            disburse_funds=self.uc_disburse,
            notifications=self.build_notifications(timers, key="disburse", on_changed=on_changed),
            run_io=self.run_io,
            on_changed=on_changed,
        )
