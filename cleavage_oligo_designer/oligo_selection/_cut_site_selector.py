############################################
# imports
############################################

from typing import List, Optional, Tuple

from Bio.SeqUtils import MeltingTemp

from cleavage_oligo_designer.database import Enzyme, Oligo
from cleavage_oligo_designer.experiment_specific import OligoAssembler
from cleavage_oligo_designer.oligo_property_filter import DuplexStabilityFilter
from cleavage_oligo_designer.sequence_generator import Fragment

############################################
# Cut Candidate Class
############################################


class CutCandidate:
    """
    A cut between two adjacent fragments of a transcript.

    :param transcript_id: Identifier of the transcript.
    :type transcript_id: str
    :param boundary_index: Index i of the boundary, i.e. the cut lies between fragment i and fragment i+1.
    :type boundary_index: int
    :param cut_position: Length of the transcript part upstream of the cut.
    :type cut_position: int
    """

    def __init__(self, transcript_id: str, boundary_index: int, cut_position: int) -> None:
        """Constructor for the CutCandidate class."""
        self.transcript_id = transcript_id
        self.boundary_index = boundary_index
        self.cut_position = cut_position

    def __repr__(self) -> str:
        return f"CutCandidate({self.transcript_id}, boundary={self.boundary_index}, position={self.cut_position})"


############################################
# Cut Site Selector Class
############################################


class CutSiteSelector:
    """
    The CutSiteSelector picks the cut site closest to the 3' end of a transcript for which usable oligos can be designed.

    The boundaries between the fragments are visited from the 3' end towards the 5' end. A boundary is skipped if one
    of the adjacent fragments is too short to host the oligos, or if the RE-probe forms a stable dimer (with itself
    or with the B-probe) or hairpin at the incubation temperature of the enzyme. The first boundary passing all checks
    is selected.

    :param oligo_assembler: The assembler designing the oligos for a boundary.
    :type oligo_assembler: OligoAssembler
    :param nn_table: Thermodynamic table of Watson-Crick dinucleotide steps, defaults to MeltingTemp.DNA_NN3.
    :type nn_table: dict, optional
    :param imm_table: Thermodynamic table of internal single mismatches, defaults to MeltingTemp.DNA_IMM1.
    :type imm_table: dict, optional
    """

    def __init__(
        self,
        oligo_assembler: OligoAssembler,
        nn_table: dict = MeltingTemp.DNA_NN3,
        imm_table: dict = MeltingTemp.DNA_IMM1,
    ) -> None:
        """Constructor for the CutSiteSelector class."""
        self.oligo_assembler = oligo_assembler
        self.nn_table = nn_table
        self.imm_table = imm_table

    def select(
        self, transcript_id: str, fragments: List[Fragment], enzyme: Enzyme
    ) -> Optional[Tuple[CutCandidate, Oligo, Oligo]]:
        """
        Select the cut site and design the oligos for it.

        :param transcript_id: Identifier of the transcript.
        :type transcript_id: str
        :param fragments: Fragments of the digested transcript in 5'->3' order.
        :type fragments: List[Fragment]
        :param enzyme: The enzyme used for the digestion.
        :type enzyme: Enzyme
        :return: The selected cut, the RE-probe and the B-probe, or None if no boundary can be used.
        :rtype: Optional[Tuple[CutCandidate, Oligo, Oligo]]
        """
        duplex_filter = DuplexStabilityFilter(
            T=enzyme.incubation_temperature, nn_table=self.nn_table, imm_table=self.imm_table
        )
        upstream_length_min = max(self.oligo_assembler.b_probe_base_length, enzyme.upstream_probe_length)
        downstream_length_min = enzyme.downstream_probe_length

        for boundary_index in range(len(fragments) - 2, -1, -1):
            upstream = fragments[boundary_index].sequence
            downstream = fragments[boundary_index + 1].sequence
            if len(upstream) < upstream_length_min or len(downstream) < downstream_length_min:
                continue

            b_probe = self.oligo_assembler.design_b_probe(upstream)
            re_probe = self.oligo_assembler.design_re_probe(upstream, downstream, enzyme)
            if not duplex_filter.apply(re_probe.core_sequence, partner_sequence=b_probe.core_sequence):
                continue

            cut_candidate = CutCandidate(
                transcript_id=transcript_id,
                boundary_index=boundary_index,
                cut_position=fragments[boundary_index + 1].start,
            )
            return cut_candidate, re_probe, b_probe

        return None
