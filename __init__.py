"""Monte Carlo estimation of pi, advanced one bounded batch per tick."""

__version__ = "0.1.0"
