"""rangectl — calendar-rule arithmetic and range selector state."""

__version__ = "0.1.0"
