"""nextday — validate a calendar date and compute the day after it."""

__version__ = "0.1.0"
