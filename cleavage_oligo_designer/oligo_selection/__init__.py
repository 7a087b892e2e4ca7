"""
This module provides the selection of the cut site and the containers for the design results.
"""

from ._cut_site_selector import CutCandidate, CutSiteSelector
from ._design_record import DesignRecord, EnzymeDesign

__all__ = [
    "CutCandidate",
    "CutSiteSelector",
    "DesignRecord",
    "EnzymeDesign",
]
