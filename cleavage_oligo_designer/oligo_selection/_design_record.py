############################################
# imports
############################################

from typing import List

from cleavage_oligo_designer.database import Enzyme, OligoRegistry

from ._cut_site_selector import CutCandidate

############################################
# Design Record Class
############################################


class DesignRecord:
    """
    The design result of one transcript for one enzyme. Oligos are referenced by their index in the registry.

    :param transcript_id: Identifier of the transcript.
    :type transcript_id: str
    :param transcript_length: Length of the transcript.
    :type transcript_length: int
    :param cut_candidate: The selected cut, None if no oligos could be designed, defaults to None.
    :type cut_candidate: CutCandidate, optional
    :param re_probe_index: Registry index of the RE-probe, defaults to None.
    :type re_probe_index: int, optional
    :param b_probe_index: Registry index of the B-probe, defaults to None.
    :type b_probe_index: int, optional
    """

    def __init__(
        self,
        transcript_id: str,
        transcript_length: int,
        cut_candidate: CutCandidate = None,
        re_probe_index: int = None,
        b_probe_index: int = None,
    ) -> None:
        """Constructor for the DesignRecord class."""
        self.transcript_id = transcript_id
        self.transcript_length = transcript_length
        self.cut_candidate = cut_candidate
        self.re_probe_index = re_probe_index
        self.b_probe_index = b_probe_index

    def __repr__(self) -> str:
        return f"DesignRecord({self.transcript_id}, {self.cut_candidate})"

    @property
    def is_designed(self) -> bool:
        return self.cut_candidate is not None

    @property
    def five_prime_length(self) -> int:
        """Length of the transcript part upstream of the cut."""
        if self.cut_candidate is None:
            return None
        return self.cut_candidate.cut_position

    @property
    def three_prime_distance(self) -> int:
        """Distance between the cut and the 3' end of the transcript."""
        if self.cut_candidate is None:
            return None
        return self.transcript_length - self.cut_candidate.cut_position


############################################
# Enzyme Design Class
############################################


class EnzymeDesign:
    """
    The design result of all transcripts of a gene for one enzyme.

    :param enzyme: The enzyme.
    :type enzyme: Enzyme
    :param records: Design records in transcript order, only transcripts with at least one cut site.
    :type records: List[DesignRecord]
    :param registry: Registry holding the designed oligos.
    :type registry: OligoRegistry
    :param transcripts_without_site: Transcripts in which the enzyme does not cut.
    :type transcripts_without_site: List[str]
    """

    def __init__(
        self,
        enzyme: Enzyme,
        records: List[DesignRecord],
        registry: OligoRegistry,
        transcripts_without_site: List[str],
    ) -> None:
        """Constructor for the EnzymeDesign class."""
        self.enzyme = enzyme
        self.records = records
        self.registry = registry
        self.transcripts_without_site = transcripts_without_site

    @property
    def designed_records(self) -> List[DesignRecord]:
        return [record for record in self.records if record.is_designed]

    @property
    def transcripts_without_design(self) -> List[str]:
        """Transcripts in which the enzyme cuts, but none of the cuts could be used."""
        return [record.transcript_id for record in self.records if not record.is_designed]

    @property
    def has_design(self) -> bool:
        return len(self.designed_records) > 0
