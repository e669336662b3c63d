"""Number-theory helpers and solutions to Project Euler problems 1 to 10 and 16 to 31."""

__version__ = "0.1.0"