############################################
# imports
############################################

import os
from pathlib import Path
from typing import List

import pandas as pd
import yaml

from cleavage_oligo_designer.oligo_selection import DesignRecord, EnzymeDesign
from cleavage_oligo_designer.utils import CustomYamlDumper

############################################
# Report Writer Class
############################################


class ReportWriter:
    """
    The ReportWriter renders the design results of a gene into files.

    Three files are written per gene:

    - ``<gene_id>_report.txt``: human readable report with the enzyme metadata, the cut site of each transcript,
      a sketch of each transcript and the list of oligos.
    - ``<gene_id>_oligos.yml``: the oligo sequences to order, numbered as in the report.
    - ``<gene_id>_design.tsv``: one row per transcript and enzyme.

    Oligo numbers are 1-based in all files.

    :param dir_output: Directory the files are written to.
    :type dir_output: str
    :param diagram_width: Number of characters used to draw a transcript, defaults to 60.
    :type diagram_width: int, optional
    """

    def __init__(self, dir_output: str, diagram_width: int = 60) -> None:
        """Constructor for the ReportWriter class."""
        self.dir_output = os.path.abspath(dir_output)
        Path(self.dir_output).mkdir(parents=True, exist_ok=True)
        self.diagram_width = diagram_width

    def _draw_transcript(self, record: DesignRecord) -> str:
        cut = round(record.five_prime_length / record.transcript_length * self.diagram_width)
        return "5' " + "-" * cut + "^" + "-" * (self.diagram_width - cut) + " 3'"

    def _format_enzyme(self, enzyme_design: EnzymeDesign) -> List[str]:
        enzyme = enzyme_design.enzyme
        inactivation = (
            f"{enzyme.inactivation_temperature} °C"
            if enzyme.inactivation_temperature is not None
            else "not heat-inactivatable"
        )
        isoschizomers = ", ".join(enzyme.isoschizomers) if enzyme.isoschizomers else "-"
        return [
            f"Enzyme: {enzyme.name} ({enzyme.motif})",
            f"Incubation: {enzyme.incubation_temperature} °C, inactivation: {inactivation}",
            f"Isoschizomers: {isoschizomers}",
        ]

    def _format_records(self, enzyme_design: EnzymeDesign) -> List[str]:
        lines = []
        header = f"{'transcript':<20}{'length':>8}{'cut':>8}{'3prime':>8}{'RE-probe':>10}{'B-probe':>10}"
        lines.append(header)
        for record in enzyme_design.designed_records:
            lines.append(
                f"{record.transcript_id:<20}{record.transcript_length:>8}{record.five_prime_length:>8}"
                f"{record.three_prime_distance:>8}{record.re_probe_index + 1:>10}{record.b_probe_index + 1:>10}"
            )
            lines.append(f"  {self._draw_transcript(record)}")
        return lines

    def _format_oligos(self, enzyme_design: EnzymeDesign) -> List[str]:
        registry = enzyme_design.registry
        lines = ["RE-probes:"]
        for index, oligo in enumerate(registry.get_oligos("re_probe")):
            lines.append(
                f"  {index + 1:>3}  {oligo.sequence}  Tm {round(oligo.Tm, 2)} °C  "
                f"used by {registry.get_usage(index)} transcript(s)"
            )
        lines.append("B-probes:")
        for index, oligo in enumerate(registry.get_oligos("b_probe")):
            lines.append(f"  {index + 1:>3}  {oligo.sequence}  Tm {round(oligo.Tm, 2)} °C")
        return lines

    def write_report(self, gene_id: str, enzyme_designs: List[EnzymeDesign]) -> str:
        """
        Write the text report of a gene.

        :param gene_id: The gene identifier.
        :type gene_id: str
        :param enzyme_designs: Design results, one per enzyme.
        :type enzyme_designs: List[EnzymeDesign]
        :return: Path to the report file.
        :rtype: str
        """
        lines = [f"Gene: {gene_id}", f"Enzymes with design: {len(enzyme_designs)}", ""]
        for enzyme_design in enzyme_designs:
            lines.append("=" * (self.diagram_width + 6))
            lines.extend(self._format_enzyme(enzyme_design))
            lines.append("")
            lines.extend(self._format_records(enzyme_design))
            lines.append("")
            lines.extend(self._format_oligos(enzyme_design))
            lines.append("")
            lines.append(f"N/A (no cut site): {', '.join(enzyme_design.transcripts_without_site) or '-'}")
            lines.append(f"No design: {', '.join(enzyme_design.transcripts_without_design) or '-'}")
            lines.append("")

        file_report = os.path.join(self.dir_output, f"{gene_id}_report.txt")
        with open(file_report, "w") as handle:
            handle.write("\n".join(lines))

        return file_report

    def write_oligos_to_yaml(self, gene_id: str, enzyme_designs: List[EnzymeDesign]) -> str:
        """
        Write the oligos of a gene to a YAML file that can be used to order the oligos.

        :param gene_id: The gene identifier.
        :type gene_id: str
        :param enzyme_designs: Design results, one per enzyme.
        :type enzyme_designs: List[EnzymeDesign]
        :return: Path to the YAML file.
        :rtype: str
        """
        yaml_dict = {gene_id: {}}
        for enzyme_design in enzyme_designs:
            registry = enzyme_design.registry
            yaml_dict_enzyme = {"motif": enzyme_design.enzyme.motif}
            for role, name in [("re_probe", "RE-probe"), ("b_probe", "B-probe")]:
                for index, oligo in enumerate(registry.get_oligos(role)):
                    yaml_dict_enzyme[f"{name} {index + 1}"] = {
                        "sequence": oligo.sequence,
                        "core_sequence": oligo.core_sequence,
                        "length": oligo.length,
                        "Tm": round(oligo.Tm, 2),
                    }
            yaml_dict[gene_id][enzyme_design.enzyme.name] = yaml_dict_enzyme

        file_yaml = os.path.join(self.dir_output, f"{gene_id}_oligos.yml")
        with open(file_yaml, "w") as handle:
            yaml.dump(yaml_dict, handle, Dumper=CustomYamlDumper, default_flow_style=False, sort_keys=False)

        return file_yaml

    def write_records_to_table(self, gene_id: str, enzyme_designs: List[EnzymeDesign]) -> str:
        """
        Write the design records of a gene to a TSV table.

        :param gene_id: The gene identifier.
        :type gene_id: str
        :param enzyme_designs: Design results, one per enzyme.
        :type enzyme_designs: List[EnzymeDesign]
        :return: Path to the TSV file.
        :rtype: str
        """
        file_tsv_content = []
        for enzyme_design in enzyme_designs:
            registry = enzyme_design.registry
            for record in enzyme_design.records:
                entry = {
                    "gene_id": gene_id,
                    "enzyme": enzyme_design.enzyme.name,
                    "transcript_id": record.transcript_id,
                    "transcript_length": record.transcript_length,
                    "cut_position": record.five_prime_length,
                    "three_prime_distance": record.three_prime_distance,
                    "re_probe": None,
                    "b_probe": None,
                }
                if record.is_designed:
                    entry["re_probe"] = registry.get_oligo("re_probe", record.re_probe_index).sequence
                    entry["b_probe"] = registry.get_oligo("b_probe", record.b_probe_index).sequence
                file_tsv_content.append(entry)
            for transcript_id in enzyme_design.transcripts_without_site:
                file_tsv_content.append(
                    {"gene_id": gene_id, "enzyme": enzyme_design.enzyme.name, "transcript_id": transcript_id}
                )

        file_tsv = os.path.join(self.dir_output, f"{gene_id}_design.tsv")
        pd.DataFrame(data=file_tsv_content).to_csv(file_tsv, sep="\t", index=False)

        return file_tsv
