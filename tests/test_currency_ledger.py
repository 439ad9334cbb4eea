"""Mini README: Tests for the carry/borrow currency ledger.

Structure:
    * concrete add/subtract cases covering single and double carries/borrows.
    * algebraic checks (commutativity, left inverse, self-subtraction) over a
      spread of sample amounts.
    * subtraction failing exactly when the collapsed copper value is short.
"""

from __future__ import annotations

import itertools

import pytest

from coffer.currency import LedgerAction, Money, add, apply, subtract
from coffer.exceptions import InsufficientFunds, UnsupportedOperation

SAMPLES = [
    Money(0, 0, 0),
    Money(0, 0, 1),
    Money(0, 0, 99),
    Money(0, 1, 0),
    Money(0, 99, 99),
    Money(1, 0, 0),
    Money(1, 0, 50),
    Money(1, 1, 0),
    Money(3, 50, 50),
    Money(10, 23, 67),
    Money(12, 99, 0),
]


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        (Money(0, 0, 60), Money(0, 0, 50), Money(0, 1, 10)),
        (Money(0, 99, 99), Money(0, 1, 1), Money(1, 1, 0)),
        (Money(10, 23, 67), Money(0, 76, 33), Money(11, 0, 0)),
        (Money(2, 5, 5), Money(0, 0, 0), Money(2, 5, 5)),
    ],
)
def test_add_carries_between_denominations(first: Money, second: Money, expected: Money) -> None:
    assert add(first, second) == expected


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        (Money(1, 0, 0), Money(0, 1, 0), Money(0, 99, 0)),
        (Money(1, 0, 0), Money(0, 0, 1), Money(0, 99, 99)),
        (Money(0, 5, 0), Money(0, 0, 1), Money(0, 4, 99)),
        (Money(10, 23, 67), Money(3, 30, 70), Money(6, 92, 97)),
    ],
)
def test_subtract_borrows_from_higher_denominations(
    first: Money, second: Money, expected: Money
) -> None:
    assert subtract(first, second) == expected


@pytest.mark.parametrize(
    ("first", "second"),
    [
        (Money(0, 0, 5), Money(0, 0, 10)),
        (Money(0, 0, 0), Money(1, 0, 0)),
        (Money(0, 99, 99), Money(1, 0, 0)),
    ],
)
def test_subtract_rejects_insufficient_funds(first: Money, second: Money) -> None:
    with pytest.raises(InsufficientFunds):
        subtract(first, second)


def test_subtract_fails_when_silver_borrow_exhausts_gold() -> None:
    """Equal gold with a silver shortfall must fail rather than go negative."""

    with pytest.raises(InsufficientFunds):
        subtract(Money(1, 0, 50), Money(1, 1, 0))
    with pytest.raises(InsufficientFunds):
        subtract(Money(1, 0, 50), Money(1, 1, 60))


def test_add_is_commutative_and_normalised() -> None:
    for first, second in itertools.product(SAMPLES, repeat=2):
        result = add(first, second)
        assert result == add(second, first)
        assert 0 <= result.silver < 100
        assert 0 <= result.copper < 100
        assert result.total_copper() == first.total_copper() + second.total_copper()


def test_subtract_undoes_add() -> None:
    for first, second in itertools.product(SAMPLES, repeat=2):
        assert subtract(add(first, second), second) == first


def test_subtract_self_is_empty() -> None:
    for amount in SAMPLES:
        assert subtract(amount, amount) == Money.empty()


def test_subtract_fails_exactly_when_short() -> None:
    for first, second in itertools.product(SAMPLES, repeat=2):
        if first.total_copper() < second.total_copper():
            with pytest.raises(InsufficientFunds):
                subtract(first, second)
        else:
            result = subtract(first, second)
            assert result.total_copper() == first.total_copper() - second.total_copper()


def test_apply_dispatches_on_action() -> None:
    assert apply("add", Money(0, 0, 60), Money(0, 0, 50)) == Money(0, 1, 10)
    assert apply(" Subtract ", Money(1, 0, 0), Money(0, 1, 0)) == Money(0, 99, 0)
    assert apply(LedgerAction.SUBTRACT, Money(0, 0, 2), Money(0, 0, 1)) == Money(0, 0, 1)


def test_unknown_action_is_rejected() -> None:
    with pytest.raises(UnsupportedOperation) as excinfo:
        apply("multiply", Money(1, 0, 0), Money(1, 0, 0))
    assert "multiply" in str(excinfo.value)
    with pytest.raises(UnsupportedOperation):
        LedgerAction.from_str(None)  # type: ignore[arg-type]
