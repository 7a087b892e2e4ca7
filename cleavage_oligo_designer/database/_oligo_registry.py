############################################
# imports
############################################

from typing import List, get_args

from cleavage_oligo_designer._constants import _TYPES_OLIGO_ROLE

############################################
# Oligo Class
############################################


class Oligo:
    """
    A designed oligo, i.e. the reverse complement of the targeted transcript region decorated with the adapter sequences.

    :param role: Role of the oligo, either "re_probe" (enzyme side) or "b_probe" (ligation side).
    :type role: _TYPES_OLIGO_ROLE
    :param core_sequence: The part of the oligo hybridizing to the transcript.
    :type core_sequence: str
    :param Tm: Estimated melting temperature of the core sequence.
    :type Tm: float
    :param prefix: 5' adapter sequence, defaults to "".
    :type prefix: str, optional
    :param suffix: 3' adapter sequence, defaults to "".
    :type suffix: str, optional
    """

    def __init__(self, role: _TYPES_OLIGO_ROLE, core_sequence: str, Tm: float, prefix: str = "", suffix: str = "") -> None:
        """Constructor for the Oligo class."""
        options = get_args(_TYPES_OLIGO_ROLE)
        assert role in options, f"Oligo role not supported! '{role}' is not in {options}."

        self.role = role
        self.core_sequence = core_sequence
        self.Tm = Tm
        self.sequence = prefix + core_sequence + suffix

    def __repr__(self) -> str:
        return f"Oligo({self.role}, {self.sequence}, Tm={round(self.Tm, 2)})"

    @property
    def length(self) -> int:
        return len(self.core_sequence)


############################################
# Oligo Registry Class
############################################


class OligoRegistry:
    """
    The OligoRegistry collects the oligos designed for all transcripts of one enzyme.

    Oligos are deduplicated by their exact sequence within each role. Every new sequence gets the next index of its
    role, so that the insertion order can be used as stable numbering in the reports. For RE-probes the registry also
    counts how many transcripts use each oligo.
    """

    def __init__(self) -> None:
        """Constructor for the OligoRegistry class."""
        self.oligos = {role: [] for role in get_args(_TYPES_OLIGO_ROLE)}
        self._indices = {role: {} for role in get_args(_TYPES_OLIGO_ROLE)}
        self.re_probe_usage = {}

    def __len__(self) -> int:
        return sum(len(oligos) for oligos in self.oligos.values())

    def register(self, oligo: Oligo) -> int:
        """
        Register an oligo and return its index. If an oligo of the same role with the identical sequence was
        registered before, the existing index is reused.

        :param oligo: The oligo to register.
        :type oligo: Oligo
        :return: Index of the oligo within its role.
        :rtype: int
        """
        indices = self._indices[oligo.role]
        if oligo.sequence not in indices:
            indices[oligo.sequence] = len(self.oligos[oligo.role])
            self.oligos[oligo.role].append(oligo)
        index = indices[oligo.sequence]

        if oligo.role == "re_probe":
            self.re_probe_usage[index] = self.re_probe_usage.get(index, 0) + 1

        return index

    def get_oligos(self, role: _TYPES_OLIGO_ROLE) -> List[Oligo]:
        """Get all oligos of one role in insertion order."""
        return list(self.oligos[role])

    def get_oligo(self, role: _TYPES_OLIGO_ROLE, index: int) -> Oligo:
        return self.oligos[role][index]

    def get_usage(self, index: int) -> int:
        """Number of transcripts using the RE-probe with the given index."""
        return self.re_probe_usage.get(index, 0)
