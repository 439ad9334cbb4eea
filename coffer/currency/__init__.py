"""Mini README: Currency handling for the Coffer wallet.

This package groups the ``Money`` value type, the carry/borrow ledger that
adds and subtracts amounts, and the wallet that stores the running balance
behind a credential check. The ledger is pure; only the wallet holds state.
"""

from .ledger import LedgerAction, add, apply, subtract
from .money import Money
from .wallet import DEFAULT_BALANCE, Wallet, WalletCapability

__all__ = [
    "DEFAULT_BALANCE",
    "LedgerAction",
    "Money",
    "Wallet",
    "WalletCapability",
    "add",
    "apply",
    "subtract",
]
