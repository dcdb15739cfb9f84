"""Student budget items and income/spending records kept in text files, with a terminal menu."""

__version__ = "0.1.0"