"""Terminal games: checkers, tic-tac-toe with a computer opponent, and an Enigma-style cipher machine."""

__version__ = "0.1.0"