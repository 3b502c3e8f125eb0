"""Startup configuration for the lending client.

``ClientConfig.from_env`` is called once by the web entrypoint. A missing or
malformed backend URL raises ``ConfigError`` before any page is served.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import urlparse

from lendpay.adapters.http_client import HttpConfig
from lendpay.domain.errors import ConfigError
from lendpay.viewmodels.notification_vm import AUTO_HIDE_MS

ENV_API_URL = "LENDPAY_API_URL"
ENV_REQUEST_TIMEOUT = "LENDPAY_REQUEST_TIMEOUT_S"
ENV_NOTIFY_TIMEOUT = "LENDPAY_NOTIFY_TIMEOUT_MS"
ENV_DEMO = "LENDPAY_DEMO"

DEMO_API_URL = "http://demo.invalid"


def _env_truthy(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _coerce_positive(name: str, raw: Optional[str], fallback: float) -> float:
    if raw is None or not raw.strip():
        return fallback
    try:
        value = float(raw.strip())
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}.") from None
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}.")
    return value


@dataclass(frozen=True)
class ClientConfig:
    """Typed runtime settings for the gateway and the notification relay."""

    api_base_url: str
    request_timeout_s: float = 10
    notification_timeout_ms: int = AUTO_HIDE_MS
    demo: bool = False

    def __post_init__(self) -> None:
        url = str(self.api_base_url or "").strip()
        if not url:
            raise ConfigError(f"Backend base URL is not configured; set {ENV_API_URL}.")
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigError(f"{ENV_API_URL} must be an absolute http(s) URL, got {url!r}.")
        object.__setattr__(self, "api_base_url", url.rstrip("/"))
        if self.request_timeout_s <= 0:
            raise ConfigError("request_timeout_s must be positive.")
        if int(self.notification_timeout_ms) <= 0:
            raise ConfigError("notification_timeout_ms must be positive.")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """Read configuration from environment variables.

        Raises:
            ConfigError: When the base URL is missing/blank/not http(s), or a
                numeric override is malformed. Demo mode skips the URL check.
        """
        env = os.environ if environ is None else environ
        demo = _env_truthy(env.get(ENV_DEMO))
        url = env.get(ENV_API_URL) or ""
        if demo and not url.strip():
            url = DEMO_API_URL
        return cls(
            api_base_url=url,
            request_timeout_s=_coerce_positive(ENV_REQUEST_TIMEOUT, env.get(ENV_REQUEST_TIMEOUT), 10),
            notification_timeout_ms=int(
                _coerce_positive(ENV_NOTIFY_TIMEOUT, env.get(ENV_NOTIFY_TIMEOUT), AUTO_HIDE_MS)
            ),
            demo=demo,
        )

    def http_config(self) -> HttpConfig:
        return HttpConfig(base_url=self.api_base_url, request_timeout_s=self.request_timeout_s)


__all__ = ["ClientConfig", "ENV_API_URL", "ENV_DEMO", "ENV_NOTIFY_TIMEOUT", "ENV_REQUEST_TIMEOUT"]
