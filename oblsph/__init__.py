################################################################################
# oblsph/__init__.py
################################################################################

# >>> import oblsph
#   Imports the package, including oblsph.OblateSpheroid, oblsph.tangent,
#   oblsph.config and oblsph.constants. This is the recommended form of import.

from oblsph.oblate_spheroid import OblateSpheroid, OblateSpheroidError
from oblsph.unit_circle     import tangent
from oblsph.consistency     import check_consistency, ConsistencyReport
from oblsph.gnuplot         import plot_spheroid

import oblsph.config    as config
import oblsph.constants as constants

from oblsph.constants import RPD, DPR

################################################################################
