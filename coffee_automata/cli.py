"""Command that runs a short demonstration session of the coffee machine."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from coffee_automata.automata import Automata, Banknote

_MENU = ("kapuchino", "amerikano", "expresso")
_PRICES = (50, 62, 140)


def run_demo() -> int:
    """Run a scripted customer session and return the total change given."""
    machine = Automata(_MENU, _PRICES)
    machine.on()

    coins = 0
    machine.coin(Banknote.FIFTY)
    coins += machine.choice("amerikano")
    coins += machine.choice("kapuchino")

    machine.coin(Banknote.TWO_HUNDRED)
    coins += machine.choice("expresso")
    coins += machine.choice("amerikano")
    coins += machine.cancel()
    return coins


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the demonstration command."""
    parser = argparse.ArgumentParser(
        description="Run a demonstration session of the coffee machine."
    )
    parser.parse_args(argv)
    run_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())