"""
This module serves as an initializer for the package, aggregating the submodules of the cleavage oligo design.

Submodules:
- database: Contains the enzyme catalog, the reference data, the oligo attributes and the oligo registry.
- experiment_specific: Provides the assembly of the RE-probe and the B-probe.
- IO: Writes the design results to report, YAML and TSV files.
- oligo_property_filter: Provides functions for filtering oligos based on duplex stability.
- oligo_selection: Implements the selection of the cut site of a transcript.
- pipelines: Defines the workflow of the cleavage oligo design.
- sequence_generator: Simulates the enzymatic digestion of transcripts.
- utils: Includes various utility functions and helper methods used across the package.
"""

from . import (
    IO,
    database,
    experiment_specific,
    oligo_property_filter,
    oligo_selection,
    pipelines,
    sequence_generator,
    utils,
)

__all__ = [
    "database",
    "experiment_specific",
    "IO",
    "oligo_property_filter",
    "oligo_selection",
    "pipelines",
    "sequence_generator",
    "utils",
]
