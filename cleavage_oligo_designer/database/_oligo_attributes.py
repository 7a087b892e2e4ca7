############################################
# imports
############################################

from typing import Optional, Tuple

from Bio.Seq import Seq
from Bio.SeqUtils import MeltingTemp

from cleavage_oligo_designer._constants import (
    HAIRPIN_MIN_LOOP,
    KELVIN_OFFSET,
    LOG10_MONOVALENT_CATION,
    TM_SHORT_SEQUENCE_LENGTH,
)

############################################
# Attribute Calculation Class
############################################


class OligoAttributes:
    """
    The OligoAttributes class provides the sequence attributes needed to design and evaluate cut-site oligos.

    This class includes functionalities for determining the reverse complement, the estimated melting temperature (Tm)
    and the nearest-neighbor free energy (ΔG) of self-dimers, heterodimers and hairpins.
    """

    def __init__(self) -> None:
        """Constructor for the OligoAttributes class."""

    @staticmethod
    def _calc_reverse_complement_sequence(sequence: str) -> str:
        """Calculate the reverse complemented sequence of an oligonucleotide sequence.

        :param sequence: The nucleotide sequence.
        :type sequence: str
        :return: The reverse complemented sequence.
        :rtype: str
        """
        return str(Seq(sequence).reverse_complement())

    @staticmethod
    def _calc_Tm(sequence: str) -> float:
        """Estimate the melting temperature (Tm) of a nucleotide sequence.

        Short sequences (less than 14 bases) use the Wallace rule shifted by -7 °C:
        ``Tm = 2 * (A + T + U) + 4 * (G + C) - 7``.
        Longer sequences use the basic GC formula with a fixed salt term for 0.05 M monovalent cations:
        ``Tm = 100.5 + 41 * (G + C) / N - 820 / N + 16.6 * (-1.3)``.
        Dangling ends and mismatches are not taken into account.

        :param sequence: The nucleotide sequence (A, C, G, T, U; case-insensitive).
        :type sequence: str
        :return: The estimated melting temperature in °C.
        :rtype: float
        """
        sequence = sequence.upper().replace("U", "T")
        length = len(sequence)

        if length < TM_SHORT_SEQUENCE_LENGTH:
            return MeltingTemp.Tm_Wallace(sequence) - 7

        n_GC = sequence.count("G") + sequence.count("C")
        return 100.5 + 41 * n_GC / length - 820 / length + 16.6 * LOG10_MONOVALENT_CATION

    @staticmethod
    def _get_NN_parameters(
        top: str, bottom: str, nn_table: dict, imm_table: dict
    ) -> Optional[Tuple[float, float]]:
        """Look up the enthalpy and entropy of a dinucleotide step.

        The step is given as top strand (5'->3') and the bases opposite to it on the bottom strand (3'->5'),
        i.e. a perfectly matched step "AG" has the bottom "TC". Single mismatches are looked up in ``imm_table``,
        Watson-Crick pairs in ``nn_table``, each in both orientations.

        :param top: Dinucleotide of the top strand.
        :type top: str
        :param bottom: Dinucleotide of the bottom strand.
        :type bottom: str
        :param nn_table: Thermodynamic table of Watson-Crick dinucleotide steps.
        :type nn_table: dict
        :param imm_table: Thermodynamic table of internal single mismatches.
        :type imm_table: dict
        :return: Tuple of ΔH (kcal/mol) and ΔS (cal/(mol·K)), None if the step has no table entry.
        :rtype: Optional[Tuple[float, float]]
        """
        neighbors = f"{top}/{bottom}"
        for table in (imm_table, nn_table):
            if neighbors in table:
                return table[neighbors]
            if neighbors[::-1] in table:
                return table[neighbors[::-1]]
        return None

    @staticmethod
    def _calc_DG_alignment(
        sequence1: str,
        sequence2: str,
        offset: int,
        T: float,
        nn_table: dict,
        imm_table: dict,
        min_loop: int = None,
    ) -> float:
        """Calculate the Gibbs free energy (ΔG) of one antiparallel alignment of two sequences.

        ``sequence2`` is placed antiparallel under ``sequence1``. For a positive offset ``sequence1`` is shifted
        by ``offset`` bases so that its 3' part overlaps the 3' part of ``sequence2``, for a negative offset the
        5' parts overlap. Enthalpy and entropy of all dinucleotide steps of the overlap that have a table entry are
        summed up; all other steps contribute nothing.
        ``ΔG = ΔH - (274.15 + T) * ΔS / 1000``

        If ``min_loop`` is given, ``sequence2`` is expected to be ``sequence1`` itself and only base pairs that
        can be formed within one molecule (enclosing at least ``min_loop`` unpaired bases) are counted.

        :param sequence1: The first nucleotide sequence (5'->3').
        :type sequence1: str
        :param sequence2: The second nucleotide sequence (5'->3').
        :type sequence2: str
        :param offset: Shift of the alignment.
        :type offset: int
        :param T: The temperature in °C.
        :type T: float
        :param nn_table: Thermodynamic table of Watson-Crick dinucleotide steps.
        :type nn_table: dict
        :param imm_table: Thermodynamic table of internal single mismatches.
        :type imm_table: dict
        :param min_loop: Minimal hairpin loop size, None for intermolecular alignments, defaults to None.
        :type min_loop: int, optional
        :return: The ΔG of the alignment in kcal/mol.
        :rtype: float
        """
        # bottom strand is written 3'->5' below the top strand
        bottom = sequence2[::-1]
        start1 = max(offset, 0)
        start2 = max(-offset, 0)
        overlap = min(len(sequence1) - start1, len(bottom) - start2)

        DH = 0.0
        DS = 0.0
        for position in range(overlap - 1):
            if min_loop is not None:
                # the inner base pair of the step encloses the smaller loop
                index1 = start1 + position + 1
                index2 = len(sequence2) - 1 - (start2 + position + 1)
                if index2 - index1 - 1 < min_loop:
                    continue
            parameters = OligoAttributes._get_NN_parameters(
                top=sequence1[start1 + position : start1 + position + 2],
                bottom=bottom[start2 + position : start2 + position + 2],
                nn_table=nn_table,
                imm_table=imm_table,
            )
            if parameters:
                DH += parameters[0]
                DS += parameters[1]

        return DH - (KELVIN_OFFSET + T) * DS / 1000

    @staticmethod
    def _calc_DG_dimer(
        sequence: str,
        partner_sequence: str,
        T: float,
        nn_table: dict = MeltingTemp.DNA_NN3,
        imm_table: dict = MeltingTemp.DNA_IMM1,
    ) -> float:
        """Calculate the minimal Gibbs free energy (ΔG) of a dimer formed by two sequences.

        The sequence is slid along the antiparallel partner with offsets 0 to ``len(sequence) - 2`` and the
        minimal ΔG over all offsets is returned. For a self-dimer the partner is the sequence itself; for two
        different sequences the scan is repeated with the roles of both sequences swapped.

        :param sequence: The nucleotide sequence.
        :type sequence: str
        :param partner_sequence: The sequence the dimer is formed with.
        :type partner_sequence: str
        :param T: The temperature in °C.
        :type T: float
        :param nn_table: Thermodynamic table of Watson-Crick dinucleotide steps, defaults to MeltingTemp.DNA_NN3.
        :type nn_table: dict, optional
        :param imm_table: Thermodynamic table of internal single mismatches, defaults to MeltingTemp.DNA_IMM1.
        :type imm_table: dict, optional
        :return: The minimal ΔG in kcal/mol.
        :rtype: float
        """
        sequence = sequence.upper().replace("U", "T")
        partner_sequence = partner_sequence.upper().replace("U", "T")

        alignments = [(sequence, partner_sequence)]
        if partner_sequence != sequence:
            alignments.append((partner_sequence, sequence))

        DG_min = 0.0
        for sequence1, sequence2 in alignments:
            for offset in range(len(sequence1) - 1):
                DG = OligoAttributes._calc_DG_alignment(
                    sequence1, sequence2, offset, T, nn_table=nn_table, imm_table=imm_table
                )
                DG_min = min(DG_min, DG)
        return DG_min

    @staticmethod
    def _calc_DG_hairpin(
        sequence: str,
        T: float,
        nn_table: dict = MeltingTemp.DNA_NN3,
        imm_table: dict = MeltingTemp.DNA_IMM1,
    ) -> float:
        """Calculate the minimal Gibbs free energy (ΔG) of a hairpin formed by a sequence folding back onto itself.

        The same sliding scan as for dimers is used, but only base pairs enclosing a loop of at least
        three bases are counted. Since a hairpin can nucleate close to either end of the oligo, the scan
        covers offsets in both directions.

        :param sequence: The nucleotide sequence.
        :type sequence: str
        :param T: The temperature in °C.
        :type T: float
        :param nn_table: Thermodynamic table of Watson-Crick dinucleotide steps, defaults to MeltingTemp.DNA_NN3.
        :type nn_table: dict, optional
        :param imm_table: Thermodynamic table of internal single mismatches, defaults to MeltingTemp.DNA_IMM1.
        :type imm_table: dict, optional
        :return: The minimal ΔG in kcal/mol.
        :rtype: float
        """
        sequence = sequence.upper().replace("U", "T")

        DG_min = 0.0
        for offset in range(-(len(sequence) - 2), len(sequence) - 1):
            DG = OligoAttributes._calc_DG_alignment(
                sequence,
                sequence,
                offset,
                T,
                nn_table=nn_table,
                imm_table=imm_table,
                min_loop=HAIRPIN_MIN_LOOP,
            )
            DG_min = min(DG_min, DG)
        return DG_min
