"""
This module provides the pipeline designing the cleavage oligos.
"""

from ._cleavage_oligo_designer import CleavageOligoDesigner

__all__ = [
    "CleavageOligoDesigner",
]
