"""NiceGUI entrypoint for the lending client."""

from __future__ import annotations

import argparse
import logging
import os
from typing import Any, Callable

from nicegui import run, ui

from lendpay.app.config import ENV_DEMO, ClientConfig
from lendpay.app.controller import AppController
from lendpay.app.ui_scheduler import UiScheduler
from lendpay.domain.errors import ConfigError
from lendpay.viewmodels.borrowers_vm import BorrowersVM
from lendpay.viewmodels.notification_vm import NotificationVM
from lendpay.utils.logging import configure_root

LOGGER = logging.getLogger(__name__)


def _install_theme() -> None:
    """Install global CSS tokens for the web client."""
    ui.add_head_html(
        """
<style>
:root {
  --lp-card: rgba(255, 255, 255, 0.92);
  --lp-border: #d3dce8;
}
.lp-page { max-width: 1100px; margin: 0 auto; padding: 16px; }
.lp-card { background: var(--lp-card); border: 1px solid var(--lp-border); border-radius: 10px; }
</style>
        """
    )


def _page_scheduler(container: Any) -> UiScheduler:
    """Back keyed timers with one-shot ``ui.timer`` elements under ``container``."""

    def schedule(delay_ms: int, callback: Callable[[], None]) -> ui.timer:
        with container:
            return ui.timer(delay_ms / 1000.0, callback, once=True)

    def cancel(timer: ui.timer) -> None:
        timer.cancel()

    return UiScheduler(schedule, cancel)


def _header() -> None:
    with ui.header().classes("items-center justify-between"):
        ui.label("Loan Platform").classes("text-h6")
        with ui.row():
            ui.button(icon="home", on_click=lambda: ui.navigate.to("/")).props("flat color=white")
            ui.button(icon="people", on_click=lambda: ui.navigate.to("/borrowers")).props("flat color=white")
            ui.button(icon="monetization_on", on_click=lambda: ui.navigate.to("/disburse")).props("flat color=white")


def _render_notification(notifications: NotificationVM) -> None:
    if not notifications.open:
        return
    color = "positive" if notifications.type == "success" else "negative"
    with ui.row().classes(f"w-full items-center justify-between q-pa-sm rounded-borders bg-{color} text-white"):
        ui.label(notifications.message)
        ui.button(icon="close", on_click=notifications.dismiss).props("flat dense color=white")


def _build_ui(controller: AppController) -> None:
    """Register the NiceGUI pages."""

    @ui.page("/")
    def index() -> None:
        _header()
        with ui.column().classes("lp-page w-full items-center"):
            ui.label("Welcome to the Loan Platform").classes("text-h4")
            ui.label("Manage borrowers and disburse funds with ease").classes("text-subtitle1 text-grey-7")
            ui.label(f"Connected to API: {controller.config.api_base_url}").classes("text-body2 text-grey-7")

    @ui.page("/borrowers")
    def borrowers_page() -> None:
        _header()
        root = ui.column().classes("lp-page w-full")
        vm: BorrowersVM = controller.build_borrowers_vm(
            navigate=ui.navigate.to,
            timers=_page_scheduler(root),
            on_changed=lambda: refresh(),
        )

        @ui.refreshable
        def render_form() -> None:
            with ui.row().classes("w-full items-end q-gutter-sm"):
                ui.input("Name", value=vm.draft.name, on_change=lambda e: vm.update_draft("name", e.value))
                ui.input("Email", value=vm.draft.email, on_change=lambda e: vm.update_draft("email", e.value))
                ui.input("Phone", value=vm.draft.phone, on_change=lambda e: vm.update_draft("phone", e.value))
                ui.input(
                    "Loan Amount",
                    value=str(vm.draft.loan_amount),
                    on_change=lambda e: vm.update_draft("loan_amount", e.value),
                )
                button = ui.button("Add Borrower", on_click=vm.submit, color="primary")
                if vm.form.busy:
                    button.props("loading")

        @ui.refreshable
        def render_list() -> None:
            with ui.row().classes("w-full q-gutter-md"):
                for borrower in vm.borrowers:
                    with ui.card().classes("lp-card"):
                        ui.label(borrower.name).classes("text-h6")
                        ui.label(borrower.email).classes("text-grey-7")
                        ui.label(f"Phone: {borrower.phone}").classes("text-grey-7")
                        ui.label(f"Loan Amount: {vm.loan_amount_label(borrower)}").classes("text-grey-7")
                        ui.button(
                            "Onboard to Stripe",
                            on_click=lambda _, b=borrower.id: vm.onboard(b),
                            color="secondary",
                        )

        @ui.refreshable
        def render_notice() -> None:
            _render_notification(vm.notifications)

        def refresh() -> None:
            render_form.refresh()
            render_list.refresh()
            render_notice.refresh()

        with root:
            ui.label("Borrowers").classes("text-h4")
            render_form()
            render_list()
            render_notice()
        ui.timer(0, vm.load, once=True)

    @ui.page("/disburse")
    def disburse_page() -> None:
        _header()
        root = ui.column().classes("lp-page w-full")
        vm = controller.build_disburse_vm(
            timers=_page_scheduler(root),
            on_changed=lambda: refresh(),
        )

        @ui.refreshable
        def render_form() -> None:
            with ui.row().classes("w-full items-end q-gutter-sm"):
                selected = vm.request.selected_borrower_id
                ui.select(
                    vm.borrower_options(),
                    value=selected if selected != "" else None,
                    label="Select Borrower",
                    on_change=lambda e: on_select(e.value),
                ).classes("w-64")
                ui.number(
                    "Amount",
                    value=float(vm.request.amount),
                    prefix="$",
                    on_change=lambda e: on_amount(e.value),
                )
                render_button()

        @ui.refreshable
        def render_button() -> None:
            button = ui.button("Disburse Funds", on_click=vm.disburse, color="primary")
            if vm.form.busy:
                button.props("loading")
            if not vm.can_disburse:
                button.disable()

        @ui.refreshable
        def render_notice() -> None:
            _render_notification(vm.notifications)

        def on_select(value: Any) -> None:
            vm.select_borrower(value)
            render_button.refresh()

        def on_amount(value: Any) -> None:
            vm.set_amount(value)
            render_button.refresh()

        def refresh() -> None:
            render_form.refresh()
            render_notice.refresh()

        with root:
            ui.label("Disburse Funds").classes("text-h4")
            render_form()
            render_notice()
        ui.timer(0, vm.load, once=True)


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web client startup."""
    parser = argparse.ArgumentParser(description="Run the lending client web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--demo", action="store_true", help="use the in-memory gateway")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the NiceGUI client."""
    args = _parse_args()
    configure_root()
    environ = dict(os.environ)
    if args.demo:
        environ[ENV_DEMO] = "1"
    try:
        config = ClientConfig.from_env(environ)
    except ConfigError as exc:
        LOGGER.critical("Invalid configuration: %s", exc)
        raise SystemExit(2) from exc
    controller = AppController(config, run_io=run.io_bound)
    if args.smoke_test:
        print("web-smoke-ok", config.api_base_url, type(controller.gateway).__name__)
        return
    LOGGER.info("Backend: %s (timeout %ss)", config.api_base_url, config.request_timeout_s)
    _install_theme()
    _build_ui(controller)
    ui.run(
        host=args.host,
        port=args.port,
        title="Loan Platform",
        reload=args.reload,
        show=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
