from __future__ import annotations

import logging
from dataclasses import dataclass

from lendpay.domain.entities import Borrower, DraftBorrower
from lendpay.domain.ports import BorrowerGateway

from .error_mapping import map_gateway_error

LOGGER = logging.getLogger(__name__)

CREATE_FAILED_MESSAGE = "Failed to create borrower"


@dataclass
class CreateBorrower:
    """Submit a draft to the backend.

    No field validation happens here; blank or malformed drafts are the
    backend's to reject.
    """

    gateway: BorrowerGateway

    def __call__(self, draft: DraftBorrower) -> Borrower:
        try:
            return self.gateway.create_borrower(draft.model_copy())
        except Exception as exc:
            raise map_gateway_error(
                exc,
                code="CREATE_BORROWER_FAILED",
                message=CREATE_FAILED_MESSAGE,
                logger=LOGGER,
                action="creating borrower",
            ) from exc
