from __future__ import annotations


class InvalidInput(Exception):
    """Trip or passenger data failed a precondition."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class BaseFareError(Exception):
    """The base-fare provider could not supply a usable fare."""


class EstimationFailed(Exception):
    """End-to-end estimation failed; the cause is chained, not part of the contract."""

    def __init__(self, message: str = "Error estimating ticket price") -> None:
        super().__init__(message)
