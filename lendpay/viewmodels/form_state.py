"""Per-form submission lifecycle shared by the operator controllers.

Call context:
    ``BorrowersVM`` and ``DisburseVM`` wrap each gateway submission in
    ``begin``/``succeed``/``fail`` so a second click while a request is
    outstanding is rejected instead of issuing a duplicate call.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FormPhase(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class FormState:
    """Submission phase plus the last failure reason, if any."""

    phase: FormPhase = FormPhase.IDLE
    reason: Optional[str] = None

    @property
    def busy(self) -> bool:
        return self.phase is FormPhase.SUBMITTING

    def begin(self) -> bool:
        """Enter ``submitting``; return ``False`` when already in flight."""
        if self.busy:
            return False
        self.phase = FormPhase.SUBMITTING
        self.reason = None
        return True

    def succeed(self) -> None:
        self.phase = FormPhase.SUCCEEDED
        self.reason = None

    def fail(self, reason: str) -> None:
        self.phase = FormPhase.FAILED
        self.reason = reason


__all__ = ["FormPhase", "FormState"]
