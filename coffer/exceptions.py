"""Mini README: Error taxonomy shared by the ledger, wallet and web layer.

Structure:
    * CofferError - base class for every domain failure.
    * InsufficientFunds - a subtraction would leave the wallet negative.
    * UnsupportedOperation - an action other than add/subtract was requested.
    * Unauthorized - the wallet credential did not match.

The web interface translates these into HTTP responses; nothing below it
catches them.
"""

from __future__ import annotations


class CofferError(Exception):
    """Base class for Coffer domain errors."""


class InsufficientFunds(CofferError):
    """Raised when the minuend is smaller than the subtrahend."""

    def __init__(self, message: str = "Not enough currency in the wallet") -> None:
        super().__init__(message)


class UnsupportedOperation(CofferError, ValueError):
    """Raised for ledger actions outside ``add`` and ``subtract``."""

    def __init__(self, action: object) -> None:
        self.action = action
        super().__init__(f"Unsupported currency operation: {action}")


class Unauthorized(CofferError):
    """Raised when a wallet is unlocked with the wrong credential."""

    def __init__(self, message: str = "Sorry, wallet is locked") -> None:
        super().__init__(message)
