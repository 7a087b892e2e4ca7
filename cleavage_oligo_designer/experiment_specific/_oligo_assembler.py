############################################
# imports
############################################

from cleavage_oligo_designer._constants import B_PROBE_BASE_LENGTH, TM_MARGIN
from cleavage_oligo_designer.database import Enzyme, Oligo, OligoAttributes

############################################
# Oligo Assembler Class
############################################


class OligoAssembler:
    """
    This class is used to design the two oligos flanking a cut site.

    - The RE-probe hybridizes across the recognition site and forms the double-stranded substrate for the enzyme.
      It covers the last ``cleavage_offset + min_flank`` bases of the upstream fragment and at least
      ``downstream_motif_length + min_flank`` bases of the downstream fragment.
    - The B-probe hybridizes to the 3' end of the upstream fragment and is used for the ligation of the adapter.

    Both oligos are the reverse complement of the targeted transcript region. They are extended base by base
    until their Tm lies ``TM_MARGIN`` °C above the reaction temperature or the fragment is exhausted.

    :param ligation_temperature: Temperature of the ligation reaction in °C.
    :type ligation_temperature: float
    :param b_probe_base_length: Initial length of the B-probe, defaults to 16.
    :type b_probe_base_length: int, optional
    :param re_probe_prefix: 5' adapter of the RE-probe, defaults to "".
    :type re_probe_prefix: str, optional
    :param re_probe_suffix: 3' adapter of the RE-probe, defaults to "".
    :type re_probe_suffix: str, optional
    :param b_probe_prefix: 5' adapter of the B-probe, defaults to "".
    :type b_probe_prefix: str, optional
    :param b_probe_suffix: 3' adapter of the B-probe, defaults to "".
    :type b_probe_suffix: str, optional
    """

    def __init__(
        self,
        ligation_temperature: float,
        b_probe_base_length: int = B_PROBE_BASE_LENGTH,
        re_probe_prefix: str = "",
        re_probe_suffix: str = "",
        b_probe_prefix: str = "",
        b_probe_suffix: str = "",
    ) -> None:
        """Constructor for the OligoAssembler class."""
        self.ligation_temperature = ligation_temperature
        self.b_probe_base_length = b_probe_base_length
        self.re_probe_prefix = re_probe_prefix
        self.re_probe_suffix = re_probe_suffix
        self.b_probe_prefix = b_probe_prefix
        self.b_probe_suffix = b_probe_suffix

    def _get_core(self, target: str) -> str:
        return OligoAttributes._calc_reverse_complement_sequence(target.upper().replace("U", "T"))

    def design_b_probe(self, upstream_fragment: str) -> Oligo:
        """
        Design the B-probe for the 3' end of the upstream fragment.

        :param upstream_fragment: Sequence of the fragment upstream of the cut.
        :type upstream_fragment: str
        :return: The B-probe.
        :rtype: Oligo
        """
        Tm_target = self.ligation_temperature + TM_MARGIN
        length = min(self.b_probe_base_length, len(upstream_fragment))

        core_sequence = self._get_core(upstream_fragment[-length:])
        Tm = OligoAttributes._calc_Tm(core_sequence)
        while Tm < Tm_target and length < len(upstream_fragment):
            length += 1
            core_sequence = self._get_core(upstream_fragment[-length:])
            Tm = OligoAttributes._calc_Tm(core_sequence)

        return Oligo(
            role="b_probe",
            core_sequence=core_sequence,
            Tm=Tm,
            prefix=self.b_probe_prefix,
            suffix=self.b_probe_suffix,
        )

    def design_re_probe(self, upstream_fragment: str, downstream_fragment: str, enzyme: Enzyme) -> Oligo:
        """
        Design the RE-probe spanning the cut between two fragments.

        :param upstream_fragment: Sequence of the fragment upstream of the cut.
        :type upstream_fragment: str
        :param downstream_fragment: Sequence of the fragment downstream of the cut.
        :type downstream_fragment: str
        :param enzyme: The enzyme introducing the cut.
        :type enzyme: Enzyme
        :return: The RE-probe.
        :rtype: Oligo
        """
        Tm_target = enzyme.incubation_temperature + TM_MARGIN
        upstream = upstream_fragment[-enzyme.upstream_probe_length :]
        length = min(enzyme.downstream_probe_length, len(downstream_fragment))

        core_sequence = self._get_core(upstream + downstream_fragment[:length])
        Tm = OligoAttributes._calc_Tm(core_sequence)
        while Tm < Tm_target and length < len(downstream_fragment):
            length += 1
            core_sequence = self._get_core(upstream + downstream_fragment[:length])
            Tm = OligoAttributes._calc_Tm(core_sequence)

        return Oligo(
            role="re_probe",
            core_sequence=core_sequence,
            Tm=Tm,
            prefix=self.re_probe_prefix,
            suffix=self.re_probe_suffix,
        )
