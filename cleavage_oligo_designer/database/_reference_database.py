############################################
# imports
############################################

import logging
import os
from typing import List

import pandas as pd

from cleavage_oligo_designer.utils import FastaParser, check_if_list

############################################
# Exceptions
############################################


class UnknownGeneError(Exception):
    pass


class MissingReferenceDataError(Exception):
    pass


############################################
# Reference Database Class
############################################


class ReferenceDatabase:
    """
    The ReferenceDatabase holds the reference data the design runs on: the transcripts annotated for each gene and
    the transcript sequences.

    The gene annotation is read from a tab-separated table with the columns ``gene_id`` and ``transcript_id``,
    the sequences from FASTA files. Both are fully loaded before the design starts and are not modified afterwards.
    """

    def __init__(self) -> None:
        """Constructor for the ReferenceDatabase class."""
        self.gene_transcripts = {}
        self.transcript_sequences = {}
        self.fasta_parser = FastaParser()

    def load_gene_transcripts(self, file_tsv: str) -> None:
        """
        Load the gene to transcript annotation. The order of the transcripts in the file is kept,
        duplicated entries are ignored.

        :param file_tsv: Path to the tab-separated annotation table.
        :type file_tsv: str
        """
        if not os.path.exists(file_tsv):
            raise ValueError(f"Annotation file {file_tsv} does not exist!")

        table = pd.read_csv(file_tsv, sep="\t", comment="#", header=None, dtype=str)
        if table.shape[1] < 2:
            raise ValueError(f"Annotation file {file_tsv} has incorrect format!")
        table = table.iloc[:, :2]
        table.columns = ["gene_id", "transcript_id"]
        # drop an optional header line
        table = table[~((table.gene_id == "gene_id") & (table.transcript_id == "transcript_id"))]
        table = table.dropna().drop_duplicates()

        for gene_id, transcript_id in zip(table.gene_id, table.transcript_id):
            self.gene_transcripts.setdefault(gene_id.strip(), []).append(transcript_id.strip())

        logging.info(
            f"Loaded {len(table)} transcripts of {len(self.gene_transcripts)} genes from annotation file {file_tsv}."
        )

    def load_transcript_sequences(self, files_fasta: List[str], transcript_ids: List[str] = None) -> None:
        """
        Load the transcript sequences from FASTA files.

        :param files_fasta: Path(s) to the FASTA file(s).
        :type files_fasta: List[str]
        :param transcript_ids: Transcripts to load, all transcripts if None, defaults to None.
        :type transcript_ids: List[str], optional
        """
        sequences = self.fasta_parser.read_fasta_sequences(check_if_list(files_fasta), region_ids=transcript_ids)
        self.transcript_sequences.update(sequences)
        logging.info(f"Loaded {len(sequences)} transcript sequences.")

    def get_transcripts(self, gene_id: str) -> List[str]:
        """
        Get the transcripts of a gene in annotation order.

        :param gene_id: The gene identifier.
        :type gene_id: str
        :return: List of transcript identifiers.
        :rtype: List[str]
        """
        transcript_ids = self.gene_transcripts.get(gene_id, [])
        if len(transcript_ids) == 0:
            raise UnknownGeneError(f"Gene {gene_id} has no annotated transcripts.")
        return list(transcript_ids)

    def get_sequence(self, transcript_id: str) -> str:
        if transcript_id not in self.transcript_sequences:
            raise MissingReferenceDataError(f"No sequence found for transcript {transcript_id}.")
        return self.transcript_sequences[transcript_id]

    def get_gene_sequences(self, gene_id: str) -> dict:
        """
        Get the sequences of all transcripts of a gene.

        :param gene_id: The gene identifier.
        :type gene_id: str
        :return: Mapping from transcript identifier to sequence, in annotation order.
        :rtype: dict
        """
        return {transcript_id: self.get_sequence(transcript_id) for transcript_id in self.get_transcripts(gene_id)}
