############################################
# imports
############################################

import os
from typing import Iterator, List, Union

import yaml
from Bio.Data.IUPACData import ambiguous_dna_values

from cleavage_oligo_designer._constants import CUT_MARKER, DEFAULT_MIN_FLANK
from cleavage_oligo_designer.utils import check_if_list

FILE_ENZYME_CATALOG = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data", "enzymes.yaml")

############################################
# Enzyme Class
############################################


class Enzyme:
    """
    A restriction enzyme used to introduce a single cut into a transcript.

    The `Enzyme` class holds everything the design engine needs to know about an enzyme: its recognition pattern
    (IUPAC code, matched case-insensitively), the position of the cut within the pattern and the temperatures of the
    digestion. Instances are created once from the enzyme catalog and are never modified afterwards.

    :param name: Name of the enzyme, e.g. "HaeIII".
    :type name: str
    :param pattern: Recognition pattern, may contain degenerate IUPAC bases, e.g. "GCWGC".
    :type pattern: str
    :param cleavage_offset: 0-indexed position within the pattern where the top strand is cut.
    :type cleavage_offset: int
    :param incubation_temperature: Digestion temperature in °C.
    :type incubation_temperature: float
    :param inactivation_temperature: Heat-inactivation temperature in °C, None if the enzyme can not be heat-inactivated, defaults to None.
    :type inactivation_temperature: float, optional
    :param min_flank: Number of bases required on each side of the recognition site, defaults to 6.
    :type min_flank: int, optional
    :param motif: Display motif with the cut marked by "^". If None, it is derived from pattern and cleavage offset, defaults to None.
    :type motif: str, optional
    :param isoschizomers: Names of enzymes recognizing the same motif at the same cleavage position, defaults to None.
    :type isoschizomers: list, optional
    """

    def __init__(
        self,
        name: str,
        pattern: str,
        cleavage_offset: int,
        incubation_temperature: float,
        inactivation_temperature: float = None,
        min_flank: int = None,
        motif: str = None,
        isoschizomers: list = None,
    ) -> None:
        """Constructor for the Enzyme class."""
        pattern = pattern.upper()
        if not pattern or any(base not in ambiguous_dna_values for base in pattern):
            raise ValueError(f"Recognition pattern ({pattern}) of enzyme {name} is not a DNA sequence.")
        if not 0 <= cleavage_offset <= len(pattern):
            raise ValueError(
                f"Cleavage offset ({cleavage_offset}) of enzyme {name} is outside of the pattern {pattern}."
            )

        self.name = name
        self.pattern = pattern
        self.cleavage_offset = cleavage_offset
        self.incubation_temperature = incubation_temperature
        self.inactivation_temperature = inactivation_temperature
        self.min_flank = DEFAULT_MIN_FLANK if min_flank is None else min_flank
        self.motif = motif if motif else pattern[:cleavage_offset] + CUT_MARKER + pattern[cleavage_offset:]
        self.isoschizomers = list(isoschizomers) if isoschizomers else []

        if CUT_MARKER not in self.motif:
            raise ValueError(f"Display motif ({self.motif}) of enzyme {name} has no cut marker '{CUT_MARKER}'.")

    def __repr__(self) -> str:
        return f"Enzyme({self.name}, {self.motif})"

    @property
    def downstream_motif_length(self) -> int:
        """Number of motif bases that end up on the downstream side of the cut."""
        return len(self.motif.split(CUT_MARKER, 1)[1])

    @property
    def upstream_probe_length(self) -> int:
        """Number of upstream fragment bases covered by the RE-probe."""
        return self.cleavage_offset + self.min_flank

    @property
    def downstream_probe_length(self) -> int:
        """Minimal number of downstream fragment bases covered by the RE-probe."""
        return self.downstream_motif_length + self.min_flank

    def get_regex_pattern(self) -> str:
        """
        Translate the recognition pattern into a regular expression.
        Degenerate IUPAC bases are expanded into character classes, e.g. W -> [AT] and Y -> [CT].
        Classes containing T also accept U, so that RNA sequences are digested like their cDNA.

        :return: The regular expression (without flags) matching the recognition site.
        :rtype: str
        """
        regex = ""
        for base in self.pattern:
            bases = "".join(sorted(ambiguous_dna_values[base]))
            if "T" in bases:
                bases += "U"
            regex += bases if len(bases) == 1 else f"[{bases}]"
        return regex

    @classmethod
    def from_dict(cls, name: str, entry: dict) -> "Enzyme":
        """
        Create an enzyme from a catalog entry.

        :param name: Name of the enzyme.
        :type name: str
        :param entry: Catalog entry with the keys pattern, cleavage_offset, incubation_temperature and optionally
            inactivation_temperature, min_flank, motif and isoschizomers.
        :type entry: dict
        :return: The enzyme.
        :rtype: Enzyme
        """
        for key in ["pattern", "cleavage_offset", "incubation_temperature"]:
            if key not in entry:
                raise ValueError(f"Enzyme {name} in the catalog has no '{key}' entry.")

        return cls(
            name=name,
            pattern=entry["pattern"],
            cleavage_offset=int(entry["cleavage_offset"]),
            incubation_temperature=float(entry["incubation_temperature"]),
            inactivation_temperature=entry.get("inactivation_temperature"),
            min_flank=entry.get("min_flank"),
            motif=entry.get("motif"),
            isoschizomers=entry.get("isoschizomers"),
        )


############################################
# Enzyme Catalog Class
############################################


class EnzymeCatalog:
    """
    The enzyme catalog holds all enzymes that can be used for the design, in the order they are listed in the catalog file.

    The catalog is read from a YAML file mapping enzyme names to their properties, e.g.::

        HaeIII:
          pattern: GGCC
          cleavage_offset: 2
          incubation_temperature: 37
          inactivation_temperature: 80
          isoschizomers: [BsuRI, PhoI]

    Adding an enzyme only requires a new entry in the catalog file.
    """

    def __init__(self) -> None:
        """Constructor for the EnzymeCatalog class."""
        self.enzymes = {}

    def __len__(self) -> int:
        return len(self.enzymes)

    def __iter__(self) -> Iterator[Enzyme]:
        return iter(self.enzymes.values())

    def load_catalog(self, file_yaml: str = None) -> "EnzymeCatalog":
        """
        Load the enzymes from a catalog file. If no file is given, the catalog shipped with the package is used.

        :param file_yaml: Path to the YAML catalog file, defaults to None.
        :type file_yaml: str, optional
        :return: The loaded catalog.
        :rtype: EnzymeCatalog
        """
        file_yaml = file_yaml if file_yaml else FILE_ENZYME_CATALOG
        if not os.path.exists(file_yaml):
            raise ValueError(f"Enzyme catalog {file_yaml} does not exist!")

        with open(file_yaml, "r") as handle:
            catalog = yaml.safe_load(handle)

        if not isinstance(catalog, dict) or len(catalog) == 0:
            raise ValueError(f"Enzyme catalog {file_yaml} has incorrect format!")

        for name, entry in catalog.items():
            self.add_enzyme(Enzyme.from_dict(name, entry))

        return self

    def add_enzyme(self, enzyme: Enzyme) -> None:
        if enzyme.name.upper() in (name.upper() for name in self.enzymes):
            raise ValueError(f"Enzyme {enzyme.name} is listed twice in the enzyme catalog.")
        self.enzymes[enzyme.name] = enzyme

    def get_enzyme(self, name: str) -> Enzyme:
        """
        Get an enzyme by its name, the lookup is case-insensitive.

        :param name: Name of the enzyme.
        :type name: str
        :return: The enzyme.
        :rtype: Enzyme
        """
        for enzyme_name, enzyme in self.enzymes.items():
            if enzyme_name.upper() == name.upper():
                return enzyme
        raise ValueError(f"Enzyme {name} is not part of the enzyme catalog.")

    def get_enzymes(self, names: Union[str, List[str]] = None) -> List[Enzyme]:
        """
        Get a list of enzymes. If no names are given, all enzymes of the catalog are returned in catalog order.

        :param names: Name(s) of the enzymes, defaults to None.
        :type names: Union[str, List[str]], optional
        :return: The enzymes.
        :rtype: List[Enzyme]
        """
        if not names:
            return list(self.enzymes.values())
        return [self.get_enzyme(name) for name in check_if_list(names)]
