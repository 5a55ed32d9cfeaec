################################################################################
# oblsph/unit_circle.py: Tangent points on the unit circle
################################################################################

import numpy as np

from polymath import Pair

def tangent(pos, pnt):
    """The tangent point on the unit circle as seen from a given position.

    From any position outside the unit circle there are two tangent points. The
    one returned is on the side of the circle toward which the pointing vector
    leans.

    Input:
        pos         a Pair, or anything convertible to one, giving the position
                    from which the circle is viewed.
        pnt         a Pair pointing vector originating at pos. It need not be a
                    unit vector; only its direction relative to pos matters.

    Return:         a Pair on the unit circle. If pos is on or inside the
                    circle, the point on the circle along the line from the
                    origin through pos is returned and pnt is ignored.
    """

    pos = Pair.as_pair(pos, recursive=False)
    pnt = Pair.as_pair(pnt, recursive=False)

    r2 = float(pos.norm_sq().vals)
    rmag = float(np.sqrt(r2))
    rhat = pos / rmag

    # Inside or on the circle
    s2 = r2 - 1.
    if s2 <= 0.:
        return rhat

    # Sine and cosine of the angle between the position vector and the line of
    # sight to the tangent point
    s = float(np.sqrt(s2))
    sin_alpha = 1. / rmag
    cos_alpha = s * sin_alpha

    # rhat rotated 90 degrees counterclockwise; Pair.rot90() would overwrite rhat
    (x, y) = rhat.vals
    rhat_orth = Pair((-float(y), float(x)))

    # Components along and normal to rhat
    tpa = rhat * (rmag - s * cos_alpha)
    tpn = rhat_orth * (s * sin_alpha)

    if float(pnt.dot(rhat_orth).vals) > 0.:
        return tpa + tpn
    else:
        return tpa - tpn

################################################################################
