"""Shared HTTP transport utilities for the Borrower Gateway.

This module provides a thin wrapper around ``requests.Session`` so the REST
adapter can share timeout policy, base-URL joining and header construction.

Dependencies:
    - ``requests`` for network I/O.
    - ``lendpay.domain.errors.TransportError`` for typed transport failures.

Call context:
    - Constructed by ``lendpay.adapters.borrower_rest.BorrowerRestAdapter``.
    - Used only inside adapter methods; use cases interact through ports.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import exceptions as req_exc

from lendpay.domain.errors import ConfigError, TransportError

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpConfig:
    """Connection settings handed to the gateway at startup.

    Attributes:
        base_url: Absolute backend origin, for example ``https://api.example``.
        request_timeout_s: Timeout in seconds applied to every request.
    """
    base_url: str
    request_timeout_s: float = 10

    def __post_init__(self) -> None:
        if not str(self.base_url or "").strip():
            raise ConfigError("HttpConfig requires a non-empty base_url.")
        if self.request_timeout_s <= 0:
            raise ConfigError("HttpConfig.request_timeout_s must be positive.")


class JsonSession:
    """Shared requests wrapper for JSON calls against one backend.

    This class is intentionally transport-only and never retries. Callers
    decide how to map non-2xx responses into gateway errors.
    """

    def __init__(self, cfg: HttpConfig) -> None:
        """Create a session bound to ``cfg.base_url``.

        Side Effects:
            Creates a persistent ``requests.Session`` object.
        """
        self.session = requests.Session()
        self.cfg = cfg

    def url(self, path: str) -> str:
        """Join ``path`` onto the configured base URL."""
        base = self.cfg.base_url.strip()
        if base.endswith("/"):
            base = base[:-1]
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{base}{path}"

    @staticmethod
    def _headers(json_body: bool = False) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def get(self, path: str, *, timeout: Optional[float] = None) -> requests.Response:
        """Send a GET request.

        Raises:
            TransportError: On timeout, connectivity or other request failures.
        """
        url = self.url(path)
        context = f"GET {url}"
        LOGGER.debug(context)
        try:
            return self.session.get(
                url,
                headers=self._headers(),
                timeout=timeout or self.cfg.request_timeout_s,
            )
        except req_exc.Timeout as exc:
            raise TransportError(f"Timeout contacting {url}", context=context) from exc
        except req_exc.ConnectionError as exc:
            raise TransportError(f"Cannot connect to {url}: {exc}", context=context) from exc
        except req_exc.RequestException as exc:
            raise TransportError(str(exc), context=context) from exc

    def post(
        self,
        path: str,
        *,
        json_body: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> requests.Response:
        """Send a JSON POST request.

        Raises:
            TransportError: On timeout, connectivity or other request failures.

        Side Effects:
            Serializes ``json_body`` with ``json.dumps`` before sending.
        """
        url = self.url(path)
        context = f"POST {url}"
        LOGGER.debug(context)
        data = None if json_body is None else json.dumps(json_body)
        try:
            return self.session.post(
                url,
                data=data,
                headers=self._headers(json_body=json_body is not None),
                timeout=timeout or self.cfg.request_timeout_s,
            )
        except req_exc.Timeout as exc:
            raise TransportError(f"Timeout contacting {url}", context=context) from exc
        except req_exc.ConnectionError as exc:
            raise TransportError(f"Cannot connect to {url}: {exc}", context=context) from exc
        except req_exc.RequestException as exc:
            raise TransportError(str(exc), context=context) from exc


__all__ = ["HttpConfig", "JsonSession"]
