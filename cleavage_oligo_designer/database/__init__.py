"""
This module provides the reference data, the enzyme catalog and the containers for designed oligos.
"""

from ._enzyme_catalog import Enzyme, EnzymeCatalog
from ._oligo_attributes import OligoAttributes
from ._oligo_registry import Oligo, OligoRegistry
from ._reference_database import (
    MissingReferenceDataError,
    ReferenceDatabase,
    UnknownGeneError,
)

__all__ = [
    "Enzyme",
    "EnzymeCatalog",
    "OligoAttributes",
    "Oligo",
    "OligoRegistry",
    "ReferenceDatabase",
    "UnknownGeneError",
    "MissingReferenceDataError",
]
