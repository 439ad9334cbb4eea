"""Mini README: Immutable gold/silver/copper value type.

Structure:
    * Money - frozen dataclass holding a normalised three-denomination amount.
    * DENOMINATION_BASE - number of lower coins making up one higher coin.

Every ``Money`` instance satisfies ``0 <= silver < 100``, ``0 <= copper < 100``
and ``gold >= 0``; construction fails otherwise, so the ledger never sees an
unnormalised operand.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict

DENOMINATION_BASE = 100

_TOKEN_PATTERN = re.compile(r"^(\d+)([gsc])$")


@dataclass(frozen=True, slots=True)
class Money:
    """Amount of gold, silver and copper coins."""

    gold: int = 0
    silver: int = 0
    copper: int = 0

    def __post_init__(self) -> None:
        for name in ("gold", "silver", "copper"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} cannot be negative, got {value}")
        if self.silver >= DENOMINATION_BASE or self.copper >= DENOMINATION_BASE:
            raise ValueError(
                f"silver and copper must be below {DENOMINATION_BASE}, got {self.silver}s {self.copper}c"
            )

    @classmethod
    def empty(cls) -> "Money":
        return cls(0, 0, 0)

    @classmethod
    def parse(cls, text: str) -> "Money":
        """Parse amounts such as ``"10g 23s 67c"``; omitted coins count as zero."""

        amounts = {"g": 0, "s": 0, "c": 0}
        seen = set()
        for token in text.lower().split():
            match = _TOKEN_PATTERN.match(token)
            if not match:
                raise ValueError(f"Cannot parse money token '{token}'")
            number, unit = match.groups()
            if unit in seen:
                raise ValueError(f"Denomination '{unit}' given more than once")
            seen.add(unit)
            amounts[unit] = int(number)
        return cls(gold=amounts["g"], silver=amounts["s"], copper=amounts["c"])

    def total_copper(self) -> int:
        """Collapse the amount into copper coins for ordering comparisons."""

        return (self.gold * DENOMINATION_BASE + self.silver) * DENOMINATION_BASE + self.copper

    def as_dict(self) -> Dict[str, int]:
        return {"gold": self.gold, "silver": self.silver, "copper": self.copper}

    def __str__(self) -> str:
        return f"{self.gold}g {self.silver}s {self.copper}c"
