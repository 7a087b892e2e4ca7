############################################
# imports
############################################

import unittest

from cleavage_oligo_designer.database import EnzymeCatalog
from cleavage_oligo_designer.experiment_specific import OligoAssembler
from cleavage_oligo_designer.oligo_selection import CutSiteSelector, DesignRecord
from cleavage_oligo_designer.sequence_generator import DigestionSimulator

############################################
# setup
############################################

# Global Parameters
SITE = "TTAA"
TRANSCRIPT = "GT" * 15 + SITE + "G" * 20

############################################
# tests
############################################


class TestCutSiteSelector(unittest.TestCase):
    """Test that the usable cut site closest to the 3' end is selected."""

    def setUp(self):
        self.enzyme = EnzymeCatalog().load_catalog().get_enzyme("MseI")
        self.digestion_simulator = DigestionSimulator(self.enzyme)
        self.cut_site_selector = CutSiteSelector(oligo_assembler=OligoAssembler(ligation_temperature=25))

    def _select(self, sequence):
        fragments = self.digestion_simulator.digest(sequence)
        return self.cut_site_selector.select("transcript", fragments, self.enzyme)

    def test_single_site(self):
        cut_candidate, re_probe, b_probe = self._select(TRANSCRIPT)

        assert cut_candidate.boundary_index == 0, "error: wrong boundary selected!"
        assert cut_candidate.cut_position == 31, f"error: wrong cut position ({cut_candidate.cut_position})!"
        assert re_probe.core_sequence == "CCCCCCTTAAACACAC", f"error: wrong RE-probe ({re_probe})!"
        assert b_probe.core_sequence == "AACACACACACACACA", f"error: wrong B-probe ({b_probe})!"

    def test_three_prime_site_preferred(self):
        sequence = TRANSCRIPT + SITE + "G" * 20
        cut_candidate, re_probe, _ = self._select(sequence)

        assert cut_candidate.boundary_index == 1, "error: cut site closest to the 3' end not selected!"
        assert cut_candidate.cut_position == 55, f"error: wrong cut position ({cut_candidate.cut_position})!"
        assert re_probe.core_sequence == "CCCCCCTTAACCCCCC", f"error: wrong RE-probe ({re_probe})!"

    def test_short_fragment_skipped(self):
        # the 3' fragment is too short for the RE-probe
        sequence = TRANSCRIPT + SITE + "GGG"
        cut_candidate, _, _ = self._select(sequence)
        assert cut_candidate.boundary_index == 0, "error: boundary with a too short fragment selected!"

    def test_unstable_oligo_skipped(self):
        # the RE-probe of the 3' site is palindromic and forms a stable self-dimer
        sequence = TRANSCRIPT + "CGCGCG" + SITE + "CGCGCG" + "G" * 20
        cut_candidate, re_probe, _ = self._select(sequence)
        assert cut_candidate.boundary_index == 0, "error: boundary with a self-dimerizing RE-probe selected!"
        assert re_probe.core_sequence == "CCCCCCTTAAACACAC", f"error: wrong RE-probe ({re_probe})!"

    def test_no_design(self):
        selection = self._select("GT" * 4 + SITE + "G" * 20)
        assert selection is None, "error: cut site with a too short upstream fragment selected!"

        selection = self.cut_site_selector.select(
            "transcript", self.digestion_simulator.digest("GT" * 20), self.enzyme
        )
        assert selection is None, "error: cut site selected in a transcript without recognition site!"


class TestDesignRecord(unittest.TestCase):
    """Test the positions reported for a design."""

    def test_distances(self):
        enzyme = EnzymeCatalog().load_catalog().get_enzyme("MseI")
        fragments = DigestionSimulator(enzyme).digest(TRANSCRIPT)
        cut_candidate, _, _ = CutSiteSelector(OligoAssembler(ligation_temperature=25)).select(
            "transcript", fragments, enzyme
        )

        record = DesignRecord(
            transcript_id="transcript",
            transcript_length=len(TRANSCRIPT),
            cut_candidate=cut_candidate,
            re_probe_index=0,
            b_probe_index=0,
        )
        assert record.is_designed, "error: record with cut site not designed!"
        assert record.five_prime_length == 31, "error: wrong 5' length!"
        assert record.three_prime_distance == 23, "error: wrong 3' distance!"

        record = DesignRecord(transcript_id="transcript", transcript_length=len(TRANSCRIPT))
        assert not record.is_designed, "error: record without cut site designed!"
        assert record.three_prime_distance is None, "error: 3' distance of a record without cut site!"
