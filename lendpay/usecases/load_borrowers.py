from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from lendpay.domain.entities import Borrower
from lendpay.domain.ports import BorrowerGateway

from .error_mapping import map_gateway_error

LOGGER = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to fetch borrowers"


@dataclass
class LoadBorrowers:
    """Fetch the full borrower collection, in backend order."""

    gateway: BorrowerGateway

    def __call__(self) -> List[Borrower]:
        try:
            return list(self.gateway.list_borrowers())
        except Exception as exc:
            raise map_gateway_error(
                exc,
                code="FETCH_BORROWERS_FAILED",
                message=FETCH_FAILED_MESSAGE,
                logger=LOGGER,
                action="fetching borrowers",
            ) from exc
