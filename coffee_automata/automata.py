"""State machine of a simple coffee vending machine."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, IntEnum


class Banknote(IntEnum):
    """Banknotes the machine accepts, valued by their face value."""

    FIFTY = 50
    HUNDRED = 100
    TWO_HUNDRED = 200
    FIVE_HUNDRED = 500


class State(Enum):
    """States the machine can be in."""

    OFF = "off"
    WAIT = "wait"
    ACCEPT = "accept"
    CHECK = "check"
    COOK = "cook"


class Automata:
    """A coffee machine that takes banknotes, cooks drinks and gives change."""

    def __init__(self, menu: Iterable[str], prices: Iterable[int]) -> None:
        names = list(menu)
        costs = list(prices)
        if len(names) != len(costs):
            raise ValueError(
                f"menu has {len(names)} drinks but {len(costs)} prices were given"
            )
        self._drinks: list[tuple[str, int]] = list(zip(names, costs))
        self._cash = 0
        self._state = State.OFF

    @property
    def menu(self) -> dict[str, int]:
        """Drink names mapped to their prices."""
        return dict(self._drinks)

    @property
    def state(self) -> State:
        """The current state of the machine."""
        return self._state

    def on(self) -> None:
        """Switch the machine on; has no effect unless it is off."""
        if self._state is State.OFF:
            self._state = State.WAIT

    def off(self) -> None:
        """Switch the machine off."""
        self._state = State.OFF

    def coin(self, banknote: Banknote) -> int:
        """Insert a banknote.

        Returns the banknote's value if the machine cannot take it, else 0.
        """
        value = int(banknote)
        if self._state in (State.OFF, State.COOK):
            return value
        self._cash += value
        self._state = State.ACCEPT
        return 0

    def choice(self, drink: str) -> int:
        """Choose a drink.

        Returns the change after cooking it, or 0 if nothing was cooked.
        """
        if self._state not in (State.ACCEPT, State.CHECK):
            return 0
        price = self._price_of(drink)
        if price is None:
            return 0
        self._state = State.CHECK
        if self._cash < price:
            return 0
        return self._cook(price)

    def cancel(self) -> int:
        """Leave drink selection and return the money paid in."""
        if self._state not in (State.ACCEPT, State.CHECK):
            return 0
        self._state = State.WAIT
        return self._give_change()

    def _price_of(self, drink: str) -> int | None:
        return next((price for name, price in self._drinks if name == drink), None)

    def _cook(self, price: int) -> int:
        self._cash -= price
        self._state = State.COOK
        return self._finish()

    def _finish(self) -> int:
        self._state = State.WAIT
        return self._give_change()

    def _give_change(self) -> int:
        change, self._cash = self._cash, 0
        return change