from __future__ import annotations

import logging
from dataclasses import dataclass

from lendpay.domain.ports import BorrowerGateway, BorrowerId

from .error_mapping import map_gateway_error

LOGGER = logging.getLogger(__name__)

ONBOARDING_FAILED_MESSAGE = "Error onboarding to Stripe"


@dataclass
class StartOnboarding:
    """Ask the backend for a processor onboarding link for one borrower."""

    gateway: BorrowerGateway

    def __call__(self, borrower_id: BorrowerId) -> str:
        try:
            return self.gateway.initiate_onboarding(borrower_id)
        except Exception as exc:
            raise map_gateway_error(
                exc,
                code="ONBOARDING_FAILED",
                message=ONBOARDING_FAILED_MESSAGE,
                logger=LOGGER,
                action="onboarding to Stripe",
            ) from exc
