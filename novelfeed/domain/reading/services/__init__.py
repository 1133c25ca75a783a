from .progress_percent_calculator import ProgressPercentCalculator

__all__ = [
    "ProgressPercentCalculator",
]
