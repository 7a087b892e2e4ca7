"""
This module provides the filters evaluating the sequence properties of designed oligos.
"""

from ._filter_base import PropertyFilterBase
from ._filter_duplex_stability import DuplexStabilityFilter

__all__ = [
    "PropertyFilterBase",
    "DuplexStabilityFilter",
]
