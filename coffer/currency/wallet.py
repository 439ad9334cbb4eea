"""Mini README: In-memory wallet guarded by a credential check.

Structure:
    * Wallet - single mutable ``Money`` cell with ``get``/``set`` and ``unlock``.
    * WalletCapability - handle returned by a successful unlock; the only way
      to run ledger operations against the wallet.

Reads and writes around a ledger call happen under one lock so concurrent
requests cannot lose updates. The stored value changes only after the
ledger returns successfully.
"""

from __future__ import annotations

import hmac
import threading
from typing import Optional

from ..exceptions import Unauthorized
from ..logging_utils import get_logger
from . import ledger
from .ledger import LedgerAction
from .money import Money

LOGGER = get_logger(__name__)

DEFAULT_BALANCE = Money(10, 23, 67)


class Wallet:
    """Hold the current balance and hand out capabilities to modify it."""

    def __init__(self, initial: Optional[Money] = None, *, secret: str) -> None:
        if not secret:
            raise ValueError("A wallet secret is required.")
        self._balance = initial if initial is not None else DEFAULT_BALANCE
        self._secret = secret
        self._lock = threading.Lock()
        LOGGER.debug("Wallet initialised with balance %s", self._balance)

    def get(self) -> Money:
        with self._lock:
            return self._balance

    def set(self, value: Money) -> None:
        if not isinstance(value, Money):
            raise TypeError(f"Wallet balance must be Money, got {type(value).__name__}")
        with self._lock:
            self._balance = value

    def unlock(self, credential: Optional[str]) -> "WalletCapability":
        """Return a capability when ``credential`` matches the secret exactly."""

        if credential is None or not hmac.compare_digest(
            credential.encode("utf-8"), self._secret.encode("utf-8")
        ):
            LOGGER.warning("Rejected wallet unlock with invalid credential")
            raise Unauthorized()
        return WalletCapability(self)


class WalletCapability:
    """Authorised handle applying ledger operations to a wallet."""

    def __init__(self, wallet: Wallet) -> None:
        self._wallet = wallet

    def apply(self, action: LedgerAction | str, amount: Money) -> Money:
        """Apply ``action`` with ``amount`` and persist the result."""

        if not isinstance(action, LedgerAction):
            action = LedgerAction.from_str(action)
        wallet = self._wallet
        with wallet._lock:
            current = wallet._balance
            updated = ledger.apply(action, current, amount)
            wallet._balance = updated
        LOGGER.info("Wallet %s %s: %s -> %s", action.value, amount, current, updated)
        return updated
