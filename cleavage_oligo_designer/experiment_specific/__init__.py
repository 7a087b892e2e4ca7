"""
This module provides the assembly of the experiment specific oligos flanking a cut site.
"""

from ._oligo_assembler import OligoAssembler

__all__ = [
    "OligoAssembler",
]
