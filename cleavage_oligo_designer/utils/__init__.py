from ._checkers_and_helpers import (
    CustomYamlDumper,
    check_if_dna_sequence,
    check_if_list,
)
from ._sequence_parser import FastaParser

__all__ = [
    "FastaParser",
    "CustomYamlDumper",
    "check_if_dna_sequence",
    "check_if_list",
]
