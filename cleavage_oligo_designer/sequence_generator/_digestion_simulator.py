############################################
# imports
############################################

import re
from typing import List

from cleavage_oligo_designer.database import Enzyme

############################################
# Fragment Class
############################################


class Fragment:
    """
    A piece of a transcript between two cut sites.

    :param index: Ordinal of the fragment in 5'->3' direction.
    :type index: int
    :param start: 0-based position of the first base of the fragment in the transcript.
    :type start: int
    :param sequence: The fragment sequence.
    :type sequence: str
    """

    def __init__(self, index: int, start: int, sequence: str) -> None:
        """Constructor for the Fragment class."""
        self.index = index
        self.start = start
        self.sequence = sequence

    def __len__(self) -> int:
        return len(self.sequence)

    def __repr__(self) -> str:
        return f"Fragment({self.index}, start={self.start}, length={len(self.sequence)})"

    @property
    def end(self) -> int:
        return self.start + len(self.sequence)


############################################
# Digestion Simulator Class
############################################


class DigestionSimulator:
    """
    The DigestionSimulator predicts the fragments a restriction enzyme produces from a transcript.

    All non-overlapping occurrences of the recognition site are located in 5'->3' direction. Each site is split at
    the cleavage offset of the enzyme: the bases before the cut stay with the upstream fragment, the bases after the
    cut start the downstream fragment. Concatenating the fragments always reproduces the input sequence.

    :param enzyme: The restriction enzyme.
    :type enzyme: Enzyme
    """

    def __init__(self, enzyme: Enzyme) -> None:
        """Constructor for the DigestionSimulator class."""
        self.enzyme = enzyme
        self.regex = re.compile(f"({enzyme.get_regex_pattern()})", re.IGNORECASE)

    def count_sites(self, sequence: str) -> int:
        """Count the non-overlapping occurrences of the recognition site in a sequence."""
        return len(self.regex.findall(sequence))

    def digest(self, sequence: str) -> List[Fragment]:
        """
        Digest a sequence into fragments.

        :param sequence: The transcript sequence (5'->3').
        :type sequence: str
        :return: The fragments in 5'->3' order, a single fragment if the sequence has no recognition site.
        :rtype: List[Fragment]
        """
        # the capturing group keeps the matched sites at the odd positions
        pieces = self.regex.split(sequence)
        k = self.enzyme.cleavage_offset

        fragment_sequences = [pieces[0]]
        for site, piece in zip(pieces[1::2], pieces[2::2]):
            fragment_sequences[-1] += site[:k]
            fragment_sequences.append(site[k:] + piece)

        fragments = []
        start = 0
        for fragment_sequence in fragment_sequences:
            if not fragment_sequence:
                continue
            fragments.append(Fragment(index=len(fragments), start=start, sequence=fragment_sequence))
            start += len(fragment_sequence)

        return fragments
