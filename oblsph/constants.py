################################################################################
# oblsph/constants.py
################################################################################

import numpy as np

# Handy constants

RPD = np.pi / 180.              # radians per degree
DPR = 180. / np.pi              # degrees per radian

PI = np.pi

################################################################################
