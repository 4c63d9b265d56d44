"""Savings goal planner: solve the periodic rate a plan needs and expand its schedule."""

__version__ = "0.1.0"
