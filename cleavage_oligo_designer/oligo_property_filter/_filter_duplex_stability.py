############################################
# imports
############################################

import logging

from Bio.SeqUtils import MeltingTemp

from cleavage_oligo_designer._constants import DG_DIMER_THRESHOLD, DG_HAIRPIN_THRESHOLD
from cleavage_oligo_designer.database import OligoAttributes

from ._filter_base import PropertyFilterBase

############################################
# Duplex Stability Filter Class
############################################


class DuplexStabilityFilter(PropertyFilterBase):
    """
    A filter class for excluding oligos that form stable dimers or hairpins.

    The free energy (ΔG) of the most stable self-dimer, of the most stable heterodimer with a partner oligo
    and of the most stable hairpin is estimated with the nearest-neighbor model at the given temperature.
    An oligo is rejected if a dimer is more stable than -6 kcal/mol or a hairpin is more stable than -3 kcal/mol.

    :param T: The temperature at which the duplexes are evaluated, in degrees Celsius.
    :type T: float
    :param nn_table: Thermodynamic table of Watson-Crick dinucleotide steps, defaults to MeltingTemp.DNA_NN3.
    :type nn_table: dict, optional
    :param imm_table: Thermodynamic table of internal single mismatches, defaults to MeltingTemp.DNA_IMM1.
    :type imm_table: dict, optional
    """

    def __init__(
        self,
        T: float,
        nn_table: dict = MeltingTemp.DNA_NN3,
        imm_table: dict = MeltingTemp.DNA_IMM1,
    ) -> None:
        """Constructor for the DuplexStabilityFilter class."""
        super().__init__()
        self.T = T
        self.nn_table = nn_table
        self.imm_table = imm_table

    def apply(self, sequence: str, partner_sequence: str = None) -> bool:
        """
        Check that the oligo neither dimerizes (with itself or the partner oligo) nor folds into a hairpin.

        :param sequence: The nucleotide sequence of the oligo.
        :type sequence: str
        :param partner_sequence: The oligo used together with the sequence, defaults to None.
        :type partner_sequence: str, optional
        :return: True if all ΔG values are above the thresholds, False otherwise.
        :rtype: bool
        """
        DG_self_dimer = OligoAttributes._calc_DG_dimer(
            sequence, sequence, self.T, nn_table=self.nn_table, imm_table=self.imm_table
        )
        if DG_self_dimer < DG_DIMER_THRESHOLD:
            logging.debug(f"Oligo {sequence} rejected: self-dimer ΔG {round(DG_self_dimer, 2)}.")
            return False

        if partner_sequence:
            DG_hetero_dimer = OligoAttributes._calc_DG_dimer(
                sequence, partner_sequence, self.T, nn_table=self.nn_table, imm_table=self.imm_table
            )
            if DG_hetero_dimer < DG_DIMER_THRESHOLD:
                logging.debug(
                    f"Oligo {sequence} rejected: dimer ΔG {round(DG_hetero_dimer, 2)} with {partner_sequence}."
                )
                return False

        DG_hairpin = OligoAttributes._calc_DG_hairpin(
            sequence, self.T, nn_table=self.nn_table, imm_table=self.imm_table
        )
        if DG_hairpin < DG_HAIRPIN_THRESHOLD:
            logging.debug(f"Oligo {sequence} rejected: hairpin ΔG {round(DG_hairpin, 2)}.")
            return False

        return True
