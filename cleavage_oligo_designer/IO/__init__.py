"""
This module provides the output of the design results.
"""

from ._report_writer import ReportWriter

__all__ = [
    "ReportWriter",
]
