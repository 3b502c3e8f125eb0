"""Root logger setup for the lendpay client.

``LENDPAY_LOG_LEVEL`` (name or number) wins over ``LENDPAY_DEBUG``; a truthy
``LENDPAY_DEBUG`` selects DEBUG. Without either, ``default_level`` applies.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

ENV_LOG_LEVEL = "LENDPAY_LOG_LEVEL"
ENV_DEBUG = "LENDPAY_DEBUG"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"
_TRUTHY = {"1", "true", "yes", "on"}


def _parse_level(value: int | str) -> Optional[int]:
    if isinstance(value, int):
        return value
    text = value.strip().upper()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text)
    return level if isinstance(level, int) else None


def configure_root(
    default_level: int | str = logging.INFO,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """Install a compact handler on the root logger and return the level in effect.

    Unknown level names fall back to INFO. urllib3 connection chatter stays at
    WARNING unless the effective level is DEBUG.
    """
    env = os.environ if environ is None else environ
    requested = env.get(ENV_LOG_LEVEL, "").strip()
    if requested:
        level = _parse_level(requested)
    elif env.get(ENV_DEBUG, "").strip().lower() in _TRUTHY:
        level = logging.DEBUG
    else:
        level = _parse_level(default_level)
    if level is None:
        level = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=_FORMAT, datefmt=_DATEFMT)
    root.setLevel(level)
    logging.getLogger("urllib3").setLevel(logging.DEBUG if level <= logging.DEBUG else logging.WARNING)
    return level
