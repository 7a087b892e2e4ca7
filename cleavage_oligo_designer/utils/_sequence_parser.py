############################################
# imports
############################################

import os
from typing import List

from Bio import SeqIO

from ._checkers_and_helpers import check_if_list

############################################
# Fasta Parser Class
############################################

SEPARATOR_FASTA_HEADER_FIELDS = "::"


class FastaParser:
    """
    A parser class for handling FASTA files.

    The FastaParser class provides methods for reading transcript sequences from FASTA files.
    Headers may carry additional fields separated by ``::`` (e.g. ``ENST00000361390::MT-ND1``),
    in which case only the first field is used as transcript identifier.
    """

    def __init__(self) -> None:
        """Constructor for the FastaParser class."""

    def check_fasta_format(self, file: str) -> bool:
        """
        Validates whether the given file is in correct FASTA format.

        This function checks if a file exists and verifies whether it is in proper FASTA format by inspecting its content.

        :param file: The path to the file to be checked.
        :type file: str
        :return: True if the file is a valid FASTA file, otherwise raises a ValueError.
        :rtype: bool
        """

        def _check_fasta_content(file) -> bool:
            fasta = SeqIO.index(file, "fasta")
            return any(fasta)  # False when `fasta` is empty, i.e. wasn't a FASTA file

        if os.path.exists(file):
            if not _check_fasta_content(file):
                raise ValueError(f"Fasta file {file} has incorrect format!")
            else:
                return True
        else:
            raise ValueError(f"Fasta file {file} does not exist!")

    def parse_fasta_header(self, header: str) -> str:
        """
        Extract the transcript identifier from a FASTA header.

        :param header: The header string from a FASTA sequence.
        :type header: str
        :return: The transcript identifier.
        :rtype: str
        """
        return header.split(SEPARATOR_FASTA_HEADER_FIELDS)[0].strip()

    def read_fasta_sequences(self, files_fasta_in: List[str], region_ids: List[str] = None) -> dict:
        """
        Reads sequences from one or more FASTA files, optionally filtering by transcript identifiers.

        :param files_fasta_in: The path(s) to the input FASTA file(s).
        :type files_fasta_in: List[str]
        :param region_ids: Transcript identifiers to keep. If None, all sequences are returned, defaults to None.
        :type region_ids: List[str], optional
        :return: Mapping from transcript identifier to upper-case sequence, in file order.
        :rtype: dict
        """
        region_ids_set = set(region_ids) if region_ids else None
        sequences = {}

        for file_fasta_in in check_if_list(files_fasta_in):
            self.check_fasta_format(file_fasta_in)
            for record in SeqIO.parse(file_fasta_in, "fasta"):
                transcript_id = self.parse_fasta_header(record.id)
                if region_ids_set and transcript_id not in region_ids_set:
                    continue
                sequences[transcript_id] = str(record.seq).upper()

        return sequences
