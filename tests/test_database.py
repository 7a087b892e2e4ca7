############################################
# imports
############################################

import os
import shutil
import unittest

import yaml
from Bio.SeqUtils import MeltingTemp

from cleavage_oligo_designer._constants import HAIRPIN_MIN_LOOP
from cleavage_oligo_designer.database import (
    Enzyme,
    EnzymeCatalog,
    MissingReferenceDataError,
    Oligo,
    OligoAttributes,
    OligoRegistry,
    ReferenceDatabase,
    UnknownGeneError,
)

############################################
# setup
############################################

# Global Parameters
FILE_GENE_TRANSCRIPTS = os.path.join(os.path.dirname(__file__), "data", "gene_transcripts.tsv")
FILE_TRANSCRIPTS = os.path.join(os.path.dirname(__file__), "data", "transcripts.fna")

############################################
# tests
############################################


class TestEnzymeCatalog(unittest.TestCase):
    """Test that the enzyme catalog is loaded correctly and the enzyme properties are derived from the catalog entries."""

    def setUp(self):
        self.tmp_path = os.path.join(os.getcwd(), "tmp_enzyme_catalog")
        os.makedirs(self.tmp_path, exist_ok=True)

        self.enzyme_catalog = EnzymeCatalog().load_catalog()

    def tearDown(self):
        shutil.rmtree(self.tmp_path)

    def test_load_default_catalog(self):
        assert len(self.enzyme_catalog) == 17, f"error: wrong number of enzymes ({len(self.enzyme_catalog)}) loaded!"

        names = [enzyme.name for enzyme in self.enzyme_catalog]
        assert names[:4] == ["HaeIII", "AluI", "RsaI", "MseI"], f"error: catalog order not preserved ({names[:4]})!"

    def test_get_enzyme(self):
        enzyme = self.enzyme_catalog.get_enzyme("haeiii")
        assert enzyme.name == "HaeIII", "error: case-insensitive lookup failed!"
        assert enzyme.motif == "GG^CC", f"error: wrong display motif ({enzyme.motif})!"
        assert enzyme.isoschizomers == ["BsuRI", "PhoI"], "error: wrong isoschizomers!"

        enzyme = self.enzyme_catalog.get_enzyme("RsaI")
        assert enzyme.inactivation_temperature is None, "error: missing inactivation temperature not kept as None!"

        with self.assertRaises(ValueError):
            self.enzyme_catalog.get_enzyme("EcoRI")

    def test_get_enzymes(self):
        enzymes = self.enzyme_catalog.get_enzymes(["MseI", "DdeI"])
        assert [enzyme.name for enzyme in enzymes] == ["MseI", "DdeI"], "error: wrong enzymes returned!"

        enzymes = self.enzyme_catalog.get_enzymes("MseI")
        assert len(enzymes) == 1, "error: single enzyme name not accepted!"

        enzymes = self.enzyme_catalog.get_enzymes()
        assert len(enzymes) == len(self.enzyme_catalog), "error: not all enzymes returned!"

    def test_derived_lengths(self):
        enzyme = self.enzyme_catalog.get_enzyme("MseI")
        assert enzyme.min_flank == 6, f"error: default flank not applied ({enzyme.min_flank})!"
        assert enzyme.downstream_motif_length == 3, "error: wrong downstream motif length!"
        assert enzyme.upstream_probe_length == 7, "error: wrong upstream probe length!"
        assert enzyme.downstream_probe_length == 9, "error: wrong downstream probe length!"

        enzyme = self.enzyme_catalog.get_enzyme("NlaIII")
        assert enzyme.motif == "CATG^", f"error: wrong display motif ({enzyme.motif})!"
        assert enzyme.downstream_probe_length == 7, "error: wrong downstream probe length for a 3' cut!"

    def test_regex_pattern(self):
        assert self.enzyme_catalog.get_enzyme("MseI").get_regex_pattern() == "[TU][TU]AA"
        assert self.enzyme_catalog.get_enzyme("ApeKI").get_regex_pattern() == "GC[ATU]GC"
        assert self.enzyme_catalog.get_enzyme("CviKI-1").get_regex_pattern() == "[AG]GC[CTU]"
        assert self.enzyme_catalog.get_enzyme("DdeI").get_regex_pattern() == "C[TU][ACGTU]AG"

    def test_invalid_enzyme(self):
        with self.assertRaises(ValueError):
            Enzyme(name="Invalid", pattern="GGZC", cleavage_offset=2, incubation_temperature=37)
        with self.assertRaises(ValueError):
            Enzyme(name="Invalid", pattern="GGCC", cleavage_offset=5, incubation_temperature=37)
        with self.assertRaises(ValueError):
            Enzyme(name="Invalid", pattern="GGCC", cleavage_offset=2, incubation_temperature=37, motif="GGCC")

    def test_duplicated_enzyme(self):
        with self.assertRaises(ValueError):
            self.enzyme_catalog.add_enzyme(
                Enzyme(name="MSEI", pattern="TTAA", cleavage_offset=1, incubation_temperature=37)
            )

    def test_custom_catalog(self):
        file_catalog = os.path.join(self.tmp_path, "enzymes.yaml")
        with open(file_catalog, "w") as handle:
            yaml.dump(
                {"CustomI": {"pattern": "gatc", "cleavage_offset": 0, "incubation_temperature": 50, "min_flank": 8}},
                handle,
            )

        enzyme_catalog = EnzymeCatalog().load_catalog(file_yaml=file_catalog)
        enzyme = enzyme_catalog.get_enzyme("CustomI")
        assert enzyme.pattern == "GATC", "error: pattern not upper-cased!"
        assert enzyme.motif == "^GATC", f"error: wrong display motif ({enzyme.motif})!"
        assert enzyme.upstream_probe_length == 8, "error: custom flank not applied!"

        with open(file_catalog, "w") as handle:
            yaml.dump({"BrokenI": {"pattern": "GATC"}}, handle)
        with self.assertRaises(ValueError):
            EnzymeCatalog().load_catalog(file_yaml=file_catalog)


class TestMeltingTemperature(unittest.TestCase):
    """Test the melting temperature estimation for short and long sequences."""

    def test_short_sequence(self):
        Tm = OligoAttributes._calc_Tm("AAAAAAAAAAAAA")
        assert Tm == 19, f"error: wrong Tm ({Tm}) for a 13-mer!"

        Tm = OligoAttributes._calc_Tm("GCGCGCGCGCGCG")
        assert Tm == 45, f"error: wrong Tm ({Tm}) for a GC-only 13-mer!"

    def test_long_sequence(self):
        Tm = OligoAttributes._calc_Tm("AAAAAAAAAAAAAA")
        self.assertAlmostEqual(Tm, 100.5 - 820 / 14 + 16.6 * (-1.3), places=6)

        Tm = OligoAttributes._calc_Tm("CCCCCCTTAAACACAC")
        self.assertAlmostEqual(Tm, 100.5 + 41 * 9 / 16 - 820 / 16 + 16.6 * (-1.3), places=6)

    def test_RNA_and_lower_case(self):
        assert OligoAttributes._calc_Tm("UUUU") == OligoAttributes._calc_Tm("TTTT"), "error: U not counted as T!"
        assert OligoAttributes._calc_Tm("acgtacgtacgtacgt") == OligoAttributes._calc_Tm(
            "ACGTACGTACGTACGT"
        ), "error: Tm depends on the case of the sequence!"


class TestDuplexFreeEnergy(unittest.TestCase):
    """Test the nearest-neighbor free energy of dimers and hairpins."""

    def test_single_step(self):
        DG = OligoAttributes._calc_DG_dimer("CC", "GG", T=37)
        self.assertAlmostEqual(DG, -8.0 + (274.15 + 37) * 19.9 / 1000, places=6)

    def test_self_complementary_dimer(self):
        DG = OligoAttributes._calc_DG_dimer("CGCGAATTCGCG", "CGCGAATTCGCG", T=37)
        self.assertAlmostEqual(DG, -101.4 + (274.15 + 37) * 266.8 / 1000, places=6)

    def test_NN_parameters(self):
        parameters = OligoAttributes._get_NN_parameters("CC", "GG", MeltingTemp.DNA_NN3, MeltingTemp.DNA_IMM1)
        assert parameters == (-8.0, -19.9), f"error: wrong parameters of a matched step ({parameters})!"

        # two adjacent mismatches have no table entry
        parameters = OligoAttributes._get_NN_parameters("AA", "AA", MeltingTemp.DNA_NN3, MeltingTemp.DNA_IMM1)
        assert parameters is None, f"error: double mismatch found in the tables ({parameters})!"

    def test_no_pairing(self):
        DG = OligoAttributes._calc_DG_dimer("CCCCCCCCCCCC", "CCCCCCCCCCCC", T=37)
        assert DG == 0.0, f"error: non-pairing sequence has a ΔG ({DG}) below 0!"

    def test_hairpin(self):
        DG = OligoAttributes._calc_DG_hairpin("GCGCGCAAAAGCGCGC", T=37)
        assert DG < -10, f"error: stem of six GC pairs not detected (ΔG {DG})!"

        # a stem closing a loop of two bases can not form
        DG = OligoAttributes._calc_DG_hairpin("GCAAGC", T=37)
        assert DG == 0.0, f"error: hairpin with a too small loop accepted (ΔG {DG})!"

    def test_hairpin_with_3prime_tail(self):
        # the stem sits at the 5' end, so it is only aligned with a negative offset
        sequence = "GCGCGCAAAAGCGCGC" + "T" * 8
        DG = OligoAttributes._calc_DG_hairpin(sequence, T=37)
        assert DG < -10, f"error: stem of six GC pairs next to a 3' tail not detected (ΔG {DG})!"

        DG_positive_offsets = min(
            OligoAttributes._calc_DG_alignment(
                sequence,
                sequence,
                offset,
                T=37,
                nn_table=MeltingTemp.DNA_NN3,
                imm_table=MeltingTemp.DNA_IMM1,
                min_loop=HAIRPIN_MIN_LOOP,
            )
            for offset in range(len(sequence) - 1)
        )
        assert DG_positive_offsets > -10, "error: stem aligned without a negative offset!"
        assert DG < DG_positive_offsets, "error: negative offsets not scanned!"

    def test_reverse_complement(self):
        sequence = OligoAttributes._calc_reverse_complement_sequence("GTGTGTTTAAGGGGGG")
        assert sequence == "CCCCCCTTAAACACAC", f"error: wrong reverse complement ({sequence})!"


class TestOligoRegistry(unittest.TestCase):
    """Test that identical oligos are registered once and the usage of the RE-probes is counted."""

    def setUp(self):
        self.registry = OligoRegistry()

    def test_register(self):
        index_1 = self.registry.register(Oligo("re_probe", "CCCCCCTTAAACACAC", Tm=50.73))
        index_2 = self.registry.register(Oligo("re_probe", "AAAAAAAAATTAAACACAC", Tm=42.24))
        index_3 = self.registry.register(Oligo("re_probe", "CCCCCCTTAAACACAC", Tm=50.73))
        index_4 = self.registry.register(Oligo("b_probe", "CCCCCCTTAAACACAC", Tm=50.73))

        assert (index_1, index_2, index_3) == (0, 1, 0), "error: identical RE-probes not deduplicated!"
        assert index_4 == 0, "error: roles do not have separate indices!"
        assert len(self.registry) == 3, f"error: wrong number of oligos ({len(self.registry)})!"
        assert self.registry.get_usage(0) == 2, "error: wrong usage count!"
        assert self.registry.get_usage(1) == 1, "error: wrong usage count!"

    def test_adapters(self):
        oligo = Oligo("b_probe", "ACGT", Tm=1, prefix="TTT", suffix="GGG")
        assert oligo.sequence == "TTTACGTGGG", f"error: adapters not added ({oligo.sequence})!"
        assert oligo.length == 4, "error: length not measured on the core sequence!"

        # the same core with different adapters is a different oligo
        self.registry.register(oligo)
        self.registry.register(Oligo("b_probe", "ACGT", Tm=1))
        assert len(self.registry.get_oligos("b_probe")) == 2, "error: oligos not identified by their sequence!"

    def test_invalid_role(self):
        with self.assertRaises(AssertionError):
            Oligo("c_probe", "ACGT", Tm=1)


class TestReferenceDatabase(unittest.TestCase):
    """Test that the gene annotation and the transcript sequences are loaded correctly."""

    def setUp(self):
        self.reference_database = ReferenceDatabase()
        self.reference_database.load_gene_transcripts(file_tsv=FILE_GENE_TRANSCRIPTS)
        self.reference_database.load_transcript_sequences(files_fasta=FILE_TRANSCRIPTS)

    def test_get_transcripts(self):
        transcript_ids = self.reference_database.get_transcripts("GENE1")
        assert transcript_ids == ["T1", "T2", "T3", "T4", "T5"], f"error: wrong transcripts ({transcript_ids})!"

        with self.assertRaises(UnknownGeneError):
            self.reference_database.get_transcripts("GENE4")

    def test_get_sequence(self):
        sequence = self.reference_database.get_sequence("T3")
        assert sequence.endswith("TTAA" + "T" * 20), "error: header fields not removed from transcript id!"

        sequence = self.reference_database.get_sequence("T6")
        assert sequence == sequence.upper(), "error: sequence not upper-cased!"

        with self.assertRaises(MissingReferenceDataError):
            self.reference_database.get_sequence("T7")

    def test_get_gene_sequences(self):
        sequences = self.reference_database.get_gene_sequences("GENE2")
        assert list(sequences.keys()) == ["T6"], "error: wrong transcripts returned!"

        with self.assertRaises(MissingReferenceDataError):
            self.reference_database.get_gene_sequences("GENE3")
