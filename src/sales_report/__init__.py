"""Seller sales performance report.

Exposes the high-level ``analyze_sales_data`` API for programmatic use.
"""

from .errors import InvalidInputError
from .options import AnalysisOptions
from .runner import analyze_sales_data, run_sales_report  # Public API
from .strategies import calculate_bonus_by_profit, calculate_simple_revenue

__all__ = [
    "AnalysisOptions",
    "InvalidInputError",
    "analyze_sales_data",
    "calculate_bonus_by_profit",
    "calculate_simple_revenue",
    "run_sales_report",
]
