############################################
# imports
############################################

from typing import Literal

############################################
# types
############################################

_TYPES_OLIGO_ROLE = Literal["re_probe", "b_probe"]

############################################
# constants
############################################

CUT_MARKER = "^"

# enzyme catalog
DEFAULT_MIN_FLANK = 6

# oligo assembly
B_PROBE_BASE_LENGTH = 16
TM_MARGIN = 5

# melting temperature estimation
TM_SHORT_SEQUENCE_LENGTH = 14
LOG10_MONOVALENT_CATION = -1.3  # log10 of 0.05 M monovalent cations

# duplex stability screening
# 274.15 (not 273.15) is kept so that ΔG values match previously generated reports
KELVIN_OFFSET = 274.15
DG_DIMER_THRESHOLD = -6
DG_HAIRPIN_THRESHOLD = -3
HAIRPIN_MIN_LOOP = 3
