"""Towers of Hanoi: board model, solver, terminal commands, controller logic and display layout."""

__version__ = "0.1.0"
__all__ = ["board", "solver", "cli_game", "cli_tutorial", "controller", "layout"]