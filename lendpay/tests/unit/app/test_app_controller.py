from __future__ import annotations

import asyncio
from typing import List

from lendpay.adapters.borrower_mock import BorrowerGatewayMock
from lendpay.adapters.borrower_rest import BorrowerRestAdapter
from lendpay.app.config import ClientConfig
from lendpay.app.controller import AppController
from lendpay.tests.unit.helpers import FakeTimers, inline_io


def test_controller_builds_rest_gateway_from_config() -> None:
    config = ClientConfig(api_base_url="http://api.local", request_timeout_s=4)

    controller = AppController(config)

    assert isinstance(controller.gateway, BorrowerRestAdapter)
    assert controller.gateway.cfg.base_url == "http://api.local"
    assert controller.gateway.cfg.request_timeout_s == 4
    assert controller.uc_load.gateway is controller.gateway
    assert controller.uc_disburse.gateway is controller.gateway


def test_controller_uses_in_memory_gateway_in_demo_mode() -> None:
    controller = AppController(ClientConfig(api_base_url="http://demo.invalid", demo=True))

    assert isinstance(controller.gateway, BorrowerGatewayMock)


def test_viewmodels_do_not_share_state() -> None:
    config = ClientConfig(api_base_url="http://api.local", notification_timeout_ms=1500)
    controller = AppController(config, gateway=BorrowerGatewayMock(), run_io=inline_io)
    timers = FakeTimers()

    borrowers_vm = controller.build_borrowers_vm(navigate=lambda url: None, timers=timers)
    disburse_vm = controller.build_disburse_vm(timers=timers)

    assert borrowers_vm.notifications is not disburse_vm.notifications
    assert borrowers_vm.notifications.auto_hide_ms == 1500
    borrowers_vm.notifications.success("x")
    assert disburse_vm.notifications.open is False
    assert set(timers.pending) == {"borrowers"}


def test_end_to_end_flow_against_in_memory_gateway() -> None:
    controller = AppController(
        ClientConfig(api_base_url="http://demo.invalid", demo=True),
        run_io=inline_io,
    )
    navigated: List[str] = []
    borrowers_vm = controller.build_borrowers_vm(navigate=navigated.append)
    disburse_vm = controller.build_disburse_vm()

    async def scenario() -> None:
        for field, value in (("name", "Alice"), ("email", "a@x.com"), ("phone", "555"), ("loan_amount", "1000")):
            borrowers_vm.update_draft(field, value)
        assert await borrowers_vm.submit() is True
        borrower = borrowers_vm.borrowers[0]
        assert await borrowers_vm.onboard(borrower.id) is True

        await disburse_vm.load()
        disburse_vm.select_borrower(borrower.id)
        disburse_vm.set_amount("250")
        assert await disburse_vm.disburse() is True

    asyncio.run(scenario())

    assert navigated and navigated[0].startswith("https://processor.example/onboard/")
    assert disburse_vm.notifications.message == "Funds disbursed successfully!"
    assert borrowers_vm.loan_amount_label(borrowers_vm.borrowers[0]) == "$1000.00"
