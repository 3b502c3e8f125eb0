from __future__ import annotations

import logging
from dataclasses import dataclass

from lendpay.domain.entities import DisbursementRequest
from lendpay.domain.ports import BorrowerGateway, UseCaseError

from .error_mapping import map_gateway_error

LOGGER = logging.getLogger(__name__)

DISBURSE_FAILED_MESSAGE = "Failed to disburse funds"


@dataclass
class DisburseFunds:
    """Transfer funds from the platform to the selected borrower."""

    gateway: BorrowerGateway

    def __call__(self, request: DisbursementRequest) -> None:
        if not request.is_ready():
            raise UseCaseError("DISBURSE_NOT_READY", "Select a borrower and a positive amount.")
        try:
            self.gateway.initiate_disbursement(request.selected_borrower_id, request.amount)
        except Exception as exc:
            raise map_gateway_error(
                exc,
                code="DISBURSE_FAILED",
                message=DISBURSE_FAILED_MESSAGE,
                logger=LOGGER,
                action="disbursing funds",
            ) from exc
