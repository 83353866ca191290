# coffee-automata

A small finite-state model of a coffee vending machine. The machine takes
banknotes, lets a customer choose a drink from its menu, and gives change
once the drink is made.

## States

The machine is always in one of the `State` values:

- `OFF`: switched off. Banknotes put in are handed straight back.
- `WAIT`: switched on and idle.
- `ACCEPT`: money has been put in.
- `CHECK`: a drink was chosen but the money paid in is not yet enough.
- `COOK`: the drink is being made.

It accepts the banknotes listed in `Banknote`: `FIFTY` (50), `HUNDRED` (100),
`TWO_HUNDRED` (200) and `FIVE_HUNDRED` (500).

## Usage

```python
from coffee_automata.automata import Automata, Banknote, State

machine = Automata(["kapuchino", "amerikano", "expresso"], [50, 62, 140])
machine.on()

machine.coin(Banknote.FIFTY)            # returns 0: the money was taken
machine.choice("amerikano")             # returns 0: not enough money
assert machine.state is State.CHECK
machine.coin(Banknote.FIFTY)
change = machine.choice("amerikano")    # returns 38
assert machine.state is State.WAIT

machine.coin(Banknote.HUNDRED)
refund = machine.cancel()               # returns 100
machine.off()
```

- `Automata(menu, prices)` raises `ValueError` if the menu and the prices
  differ in length. A new machine starts in `State.OFF`.
- `on()` switches an `OFF` machine to `WAIT`; in any other state it does
  nothing. `off()` always switches the machine off.
- `coin(banknote)` adds the banknote's value to the money paid in and moves
  to `ACCEPT`, returning 0. When the machine is `OFF` or `COOK` it takes
  nothing and returns the banknote's value.
- `choice(drink)` works only in `ACCEPT` or `CHECK`. For a drink not on the
  menu it returns 0 and changes nothing. Otherwise it moves to `CHECK`; if
  enough money was paid in, it makes the drink, returns the change and goes
  back to `WAIT`, else it returns 0.
- `cancel()` in `ACCEPT` or `CHECK` returns all money paid in and goes back
  to `WAIT`; in any other state it returns 0.
- `menu` is a property mapping drink names to prices; `state` is a property
  holding the current `State`.

## Command line

```console
coffee-automata
```

This runs a short scripted session against a machine with a three-drink
menu (the same as `coffee_automata.cli.run_demo()`, which returns the total
change given) and exits with status 0.

## What it does not do

The package is a model only. The command runs a fixed script and prints
nothing; there is no interactive front end, and a machine's money and state
are not saved anywhere.

## Tests

```console
pip install -e ".[test]"
pytest
```