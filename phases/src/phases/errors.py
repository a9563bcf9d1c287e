"""Phase calculator errors."""

from __future__ import annotations


class PhaseError(Exception):
    """Base error."""


class InvalidInput(PhaseError, ValueError):
    """Raised before any computation when an argument is malformed."""

    def __init__(self, label: str, message: str | None = None) -> None:
        self.label = label
        super().__init__(message or f"Invalid {label} provided")


class PhaseNotFound(PhaseError, RuntimeError):
    """Raised when the bounded search cannot bracket the target phase."""

    def __init__(self, phase_label: str) -> None:
        self.phase_label = phase_label
        super().__init__(f"Could not find next {phase_label} within search range")
