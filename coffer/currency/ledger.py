"""Mini README: Carry/borrow arithmetic over ``Money`` values.

Structure:
    * LedgerAction - enum of the operations a wallet accepts.
    * add - base-100 addition carrying copper into silver and silver into gold.
    * subtract - borrowing subtraction that fails instead of going negative.
    * apply - dispatch helper used by the wallet and the CLI.

The functions are pure: they never touch a wallet and never partially apply
a result. Digits are processed copper -> silver -> gold on addition and
gold -> silver -> copper on subtraction.
"""

from __future__ import annotations

from enum import Enum

from ..exceptions import InsufficientFunds, UnsupportedOperation
from ..logging_utils import get_logger
from .money import DENOMINATION_BASE, Money

LOGGER = get_logger(__name__)


class LedgerAction(str, Enum):
    """Operations supported on a wallet."""

    ADD = "add"
    SUBTRACT = "subtract"

    @classmethod
    def from_str(cls, value: str) -> "LedgerAction":
        """Coerce arbitrary casing into a valid action."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise UnsupportedOperation(value) from error


def add(first: Money, second: Money) -> Money:
    """Return ``first + second``; never fails."""

    copper = first.copper + second.copper
    carry = 0
    if copper >= DENOMINATION_BASE:
        copper -= DENOMINATION_BASE
        carry = 1

    silver = first.silver + second.silver + carry
    carry = 0
    if silver >= DENOMINATION_BASE:
        silver -= DENOMINATION_BASE
        carry = 1

    gold = first.gold + second.gold + carry
    result = Money(gold, silver, copper)
    LOGGER.debug("add %s + %s = %s", first, second, result)
    return result


def subtract(first: Money, second: Money) -> Money:
    """Return ``first - second`` or raise ``InsufficientFunds``."""

    gold = first.gold - second.gold
    if gold < 0:
        LOGGER.debug("subtract %s - %s: gold deficit", first, second)
        raise InsufficientFunds()

    silver = first.silver - second.silver
    if silver < 0:
        gold -= 1
        silver += DENOMINATION_BASE
        # Borrowing into silver may exhaust gold.
        if gold < 0:
            LOGGER.debug("subtract %s - %s: silver borrow exhausted gold", first, second)
            raise InsufficientFunds()

    copper = first.copper - second.copper
    if copper < 0:
        if silver > 0:
            silver -= 1
            copper += DENOMINATION_BASE
        elif gold > 0:
            gold -= 1
            silver = DENOMINATION_BASE - 1
            copper += DENOMINATION_BASE
        else:
            LOGGER.debug("subtract %s - %s: copper deficit", first, second)
            raise InsufficientFunds()

    result = Money(gold, silver, copper)
    LOGGER.debug("subtract %s - %s = %s", first, second, result)
    return result


def apply(action: LedgerAction | str, current: Money, amount: Money) -> Money:
    """Apply ``action`` to ``current`` using ``amount`` as the operand."""

    if not isinstance(action, LedgerAction):
        action = LedgerAction.from_str(action)
    if action is LedgerAction.ADD:
        return add(current, amount)
    return subtract(current, amount)
