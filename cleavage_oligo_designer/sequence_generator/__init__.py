"""
This module provides the simulation of the enzymatic digestion of transcripts.
"""

from ._digestion_simulator import DigestionSimulator, Fragment

__all__ = [
    "DigestionSimulator",
    "Fragment",
]

classes = __all__
