############################################
# imports
############################################

import logging
import os
import sys
import warnings
from datetime import datetime
from pathlib import Path
from typing import Dict, List

import yaml
from Bio.SeqUtils import MeltingTemp as mt
from joblib import Parallel, delayed
from joblib_progress import joblib_progress

from cleavage_oligo_designer._constants import B_PROBE_BASE_LENGTH
from cleavage_oligo_designer.database import (
    Enzyme,
    EnzymeCatalog,
    MissingReferenceDataError,
    OligoRegistry,
    ReferenceDatabase,
    UnknownGeneError,
)
from cleavage_oligo_designer.experiment_specific import OligoAssembler
from cleavage_oligo_designer.IO import ReportWriter
from cleavage_oligo_designer.oligo_selection import (
    CutSiteSelector,
    DesignRecord,
    EnzymeDesign,
)
from cleavage_oligo_designer.pipelines._utils import base_parser, pipeline_step_basic
from cleavage_oligo_designer.sequence_generator import DigestionSimulator
from cleavage_oligo_designer.utils import check_if_dna_sequence, check_if_list

############################################
# Cleavage Oligo Designer
############################################


class CleavageOligoDesigner:
    """
    A class for designing the oligos of a targeted long-read RNA sequencing experiment.

    Each targeted transcript is cut once by a restriction enzyme, guided by a RE-probe hybridizing across the
    recognition site. The 5' part of the cut transcript is captured by ligation with the help of a B-probe.
    For every gene and every enzyme the pipeline:

    1. simulates the digestion of all transcripts of the gene,
    2. selects for each transcript the cut site closest to the 3' end for which usable oligos exist,
    3. designs the RE-probe and the B-probe for this cut site and screens the RE-probe for dimers and hairpins,
    4. collects the oligos, reusing identical oligos between transcripts.

    A logger is created at <dir_output>/log_cleavage_oligo_designer_<timestamp>.txt.

    :param dir_output: Directory path where output files and logs will be saved.
    :type dir_output: str
    :param n_jobs: Number of parallel jobs used to process the transcripts of a gene.
    :type n_jobs: int
    """

    def __init__(self, dir_output: str, n_jobs: int = 1) -> None:
        """Constructor for the CleavageOligoDesigner class."""

        ##### create the output folder #####
        self.dir_output = os.path.abspath(dir_output)
        Path(self.dir_output).mkdir(parents=True, exist_ok=True)

        ##### setup logger #####
        timestamp = datetime.now()
        file_logger = os.path.join(
            self.dir_output,
            f"log_cleavage_oligo_designer_{timestamp.year}-{timestamp.month}-{timestamp.day}-{timestamp.hour}-{timestamp.minute}.txt",
        )
        logging.getLogger("log_name")
        logging.basicConfig(
            format="%(asctime)s [%(levelname)s] %(message)s",
            level=logging.NOTSET,
            handlers=[logging.FileHandler(file_logger)],
        )
        logging.captureWarnings(True)
        logging.info("--------------START PIPELINE--------------")

        ##### set class parameters #####
        self.n_jobs = n_jobs
        self.reference_database = ReferenceDatabase()
        self.enzyme_catalog = EnzymeCatalog()
        self.set_developer_parameters()

    def set_developer_parameters(
        self,
        b_probe_base_length: int = B_PROBE_BASE_LENGTH,
        ligation_temperature: float = 25,
        re_probe_prefix: str = "",
        re_probe_suffix: str = "",
        b_probe_prefix: str = "",
        b_probe_suffix: str = "",
        nn_table: str = "DNA_NN3",
        imm_table: str = "DNA_IMM1",
    ) -> None:
        """
        Set developer-specific parameters for the cleavage oligo designer pipeline.

        :param b_probe_base_length: Initial length of the B-probe, defaults to 16.
        :type b_probe_base_length: int
        :param ligation_temperature: Temperature of the ligation in °C, the B-probe is extended until its Tm is 5 °C above, defaults to 25.
        :type ligation_temperature: float
        :param re_probe_prefix: 5' adapter of the RE-probe, defaults to "".
        :type re_probe_prefix: str
        :param re_probe_suffix: 3' adapter of the RE-probe, defaults to "".
        :type re_probe_suffix: str
        :param b_probe_prefix: 5' adapter of the B-probe, defaults to "".
        :type b_probe_prefix: str
        :param b_probe_suffix: 3' adapter of the B-probe, defaults to "".
        :type b_probe_suffix: str
        :param nn_table: Name of the Bio.SeqUtils.MeltingTemp table of Watson-Crick steps used for the ΔG screening, defaults to "DNA_NN3".
        :type nn_table: str
        :param imm_table: Name of the Bio.SeqUtils.MeltingTemp table of internal mismatches used for the ΔG screening, defaults to "DNA_IMM1".
        :type imm_table: str
        """
        adapters = {
            "re_probe_prefix": re_probe_prefix,
            "re_probe_suffix": re_probe_suffix,
            "b_probe_prefix": b_probe_prefix,
            "b_probe_suffix": b_probe_suffix,
        }
        for name, adapter in adapters.items():
            if adapter and not check_if_dna_sequence(adapter):
                raise ValueError(f"Adapter {name} ({adapter}) is not a DNA sequence.")

        self.b_probe_base_length = b_probe_base_length
        self.ligation_temperature = ligation_temperature
        self.adapters = adapters

        # thermodynamic tables are given by their name in Bio.SeqUtils.MeltingTemp
        self.nn_table = getattr(mt, nn_table)
        self.imm_table = getattr(mt, imm_table)

    def load_reference(self, file_gene_transcripts: str, files_fasta_transcripts: List[str]) -> None:
        """
        Load the gene annotation and the transcript sequences.

        :param file_gene_transcripts: Tab-separated table with the columns gene_id and transcript_id.
        :type file_gene_transcripts: str
        :param files_fasta_transcripts: FASTA file(s) with the transcript sequences.
        :type files_fasta_transcripts: List[str]
        """
        self.reference_database.load_gene_transcripts(file_tsv=file_gene_transcripts)
        self.reference_database.load_transcript_sequences(files_fasta=files_fasta_transcripts)

    def load_enzymes(self, file_enzyme_catalog: str = None) -> None:
        """
        Load the enzyme catalog, the catalog shipped with the package is used if no file is given.

        :param file_enzyme_catalog: Path to the YAML enzyme catalog, defaults to None.
        :type file_enzyme_catalog: str, optional
        """
        self.enzyme_catalog.load_catalog(file_yaml=file_enzyme_catalog)
        logging.info(f"Loaded {len(self.enzyme_catalog)} enzymes.")

    def _get_enzymes(self, enzyme_names: List[str] = None) -> List[Enzyme]:
        if not enzyme_names:
            return self.enzyme_catalog.get_enzymes()

        enzymes = []
        for name in check_if_list(enzyme_names):
            try:
                enzyme = self.enzyme_catalog.get_enzyme(name)
            except ValueError:
                warnings.warn(f"Enzyme {name} is not part of the enzyme catalog and is skipped.")
                continue
            # the catalog lookup ignores case, duplicates are detected on the resolved enzyme
            if enzyme.name not in [selected.name for selected in enzymes]:
                enzymes.append(enzyme)
        return enzymes

    def _get_selector(self) -> CutSiteSelector:
        oligo_assembler = OligoAssembler(
            ligation_temperature=self.ligation_temperature,
            b_probe_base_length=self.b_probe_base_length,
            **self.adapters,
        )
        return CutSiteSelector(oligo_assembler=oligo_assembler, nn_table=self.nn_table, imm_table=self.imm_table)

    @pipeline_step_basic(step_name="Design Oligos")
    def design_oligos_for_enzyme(self, transcripts: Dict[str, str], enzyme: Enzyme) -> EnzymeDesign:
        """
        Design the oligos of a set of transcripts for one enzyme.

        The transcripts are digested and the cut sites are selected in parallel. The oligos are registered
        afterwards in the order of the transcripts, so the oligo numbering does not depend on ``n_jobs``.

        :param transcripts: Mapping from transcript identifier to sequence.
        :type transcripts: Dict[str, str]
        :param enzyme: The enzyme.
        :type enzyme: Enzyme
        :return: The design result.
        :rtype: EnzymeDesign
        """
        digestion_simulator = DigestionSimulator(enzyme=enzyme)
        cut_site_selector = self._get_selector()

        def _design_transcript(transcript_id: str, sequence: str):
            fragments = digestion_simulator.digest(sequence)
            if len(fragments) <= 1:
                return transcript_id, fragments, None
            return transcript_id, fragments, cut_site_selector.select(transcript_id, fragments, enzyme)

        with joblib_progress(description=f"Design {enzyme.name}", total=len(transcripts)):
            results = Parallel(n_jobs=self.n_jobs, prefer="threads")(
                delayed(_design_transcript)(transcript_id, sequence)
                for transcript_id, sequence in transcripts.items()
            )

        registry = OligoRegistry()
        records = []
        transcripts_without_site = []
        for transcript_id, fragments, selection in results:
            if len(fragments) <= 1:
                transcripts_without_site.append(transcript_id)
                continue

            record = DesignRecord(transcript_id=transcript_id, transcript_length=len(transcripts[transcript_id]))
            if selection:
                cut_candidate, re_probe, b_probe = selection
                record.cut_candidate = cut_candidate
                record.re_probe_index = registry.register(re_probe)
                record.b_probe_index = registry.register(b_probe)
            records.append(record)

        return EnzymeDesign(
            enzyme=enzyme,
            records=records,
            registry=registry,
            transcripts_without_site=transcripts_without_site,
        )

    def design_oligos(self, gene_ids: List[str], enzyme_names: List[str] = None) -> Dict[str, List[EnzymeDesign]]:
        """
        Design the oligos for all transcripts of the given genes.

        Enzymes that yield no design for any transcript of a gene are not part of the result of this gene.

        :param gene_ids: The genes to design oligos for.
        :type gene_ids: List[str]
        :param enzyme_names: Names of the enzymes to use, all enzymes of the catalog if None, defaults to None.
        :type enzyme_names: List[str], optional
        :return: Mapping from gene identifier to the design results, one per enzyme in catalog order.
        :rtype: Dict[str, List[EnzymeDesign]]
        """
        if len(self.enzyme_catalog) == 0:
            self.load_enzymes()
        enzymes = self._get_enzymes(enzyme_names)

        designs = {}
        for gene_id in check_if_list(gene_ids):
            transcripts = self.reference_database.get_gene_sequences(gene_id)
            logging.info(f"Gene {gene_id}: {len(transcripts)} transcripts.")

            designs[gene_id] = []
            for enzyme in enzymes:
                enzyme_design = self.design_oligos_for_enzyme(transcripts=transcripts, enzyme=enzyme)
                if not enzyme_design.has_design:
                    logging.info(f"Gene {gene_id}: no design for enzyme {enzyme.name}, enzyme skipped.")
                    continue
                designs[gene_id].append(enzyme_design)

        return designs

    def generate_output(self, designs: Dict[str, List[EnzymeDesign]], write_report: bool = True) -> None:
        """
        Write the design results of each gene to the output directory.

        :param designs: Mapping from gene identifier to the design results.
        :type designs: Dict[str, List[EnzymeDesign]]
        :param write_report: Whether to write the text report in addition to the oligo and record files, defaults to True.
        :type write_report: bool
        """
        report_writer = ReportWriter(dir_output=self.dir_output)
        for gene_id, enzyme_designs in designs.items():
            if write_report:
                report_writer.write_report(gene_id=gene_id, enzyme_designs=enzyme_designs)
            report_writer.write_oligos_to_yaml(gene_id=gene_id, enzyme_designs=enzyme_designs)
            report_writer.write_records_to_table(gene_id=gene_id, enzyme_designs=enzyme_designs)

        logging.info("--------------END PIPELINE--------------")


############################################
# Cleavage Oligo Designer Pipeline
############################################


def main():
    """
    Main function for running the CleavageOligoDesigner pipeline. This function reads the configuration file,
    initializes the pipeline, loads the reference data and the enzymes, designs the oligos and writes the output.

    :param args: Command-line arguments parsed using the base parser. The arguments include:
        - config: Path to the configuration YAML file containing parameters for the pipeline.
    :type args: dict
    """
    print("--------------START PIPELINE--------------")

    args = base_parser()

    ##### read the config file #####
    with open(args["config"], "r") as handle:
        config = yaml.safe_load(handle)

    ##### initialize pipeline #####
    pipeline = CleavageOligoDesigner(
        dir_output=config["dir_output"],
        n_jobs=config["n_jobs"],
    )

    ##### set custom developer parameters #####
    pipeline.set_developer_parameters(
        b_probe_base_length=config["b_probe_base_length"],
        ligation_temperature=config["ligation_temperature"],
        re_probe_prefix=config["re_probe_prefix"],
        re_probe_suffix=config["re_probe_suffix"],
        b_probe_prefix=config["b_probe_prefix"],
        b_probe_suffix=config["b_probe_suffix"],
        nn_table=config["nn_table"],
        imm_table=config["imm_table"],
    )

    ##### design oligos #####
    try:
        pipeline.load_reference(
            file_gene_transcripts=config["file_gene_transcripts"],
            files_fasta_transcripts=config["files_fasta_transcripts"],
        )
        pipeline.load_enzymes(file_enzyme_catalog=config["file_enzyme_catalog"])
        designs = pipeline.design_oligos(gene_ids=config["gene_ids"], enzyme_names=config["enzymes"])
    except (UnknownGeneError, MissingReferenceDataError) as error:
        logging.error(str(error))
        print(f"Error: {error}")
        sys.exit(1)

    pipeline.generate_output(designs=designs, write_report=config["write_report"])

    print("--------------END PIPELINE--------------")


if __name__ == "__main__":
    main()
