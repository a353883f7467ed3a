"""
Financial Calculation Engine

Pure calculation modules for the loan and investment calculator.
All functions are deterministic and never raise on numeric input.
"""

from app.calculations import (
    rates,
    amortization,
    discounting,
    growth,
    inputs,
    calculator,
)

__all__ = ["rates", "amortization", "discounting", "growth", "inputs", "calculator"]
