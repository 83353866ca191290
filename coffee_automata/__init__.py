"""A finite-state model of a coffee vending machine, with a demonstration command."""

__version__ = "0.1.0"
__all__ = ["automata", "cli"]