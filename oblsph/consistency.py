################################################################################
# oblsph/consistency.py: Grid self-consistency check of OblateSpheroid
################################################################################

import numpy as np

from oblsph.config          import CONSISTENCY, LOGGING, TOLERANCES
from oblsph.oblate_spheroid import OblateSpheroid

class ConsistencyReport(object):
    """Accumulated errors from check_consistency()."""

    def __init__(self):
        self.count = 0              # number of grid points tested
        self.rss_error = 0.         # summed RSS coordinate round-trip errors
        self.basis_error = 0.       # summed RSS deviations of Z^i.Z_j from the
                                    # Kronecker delta
        self.max_rss_error = 0.
        self.max_basis_error = 0.

    def add(self, rss_error, basis_error):
        self.count += 1
        self.rss_error += rss_error
        self.basis_error += basis_error
        self.max_rss_error = max(self.max_rss_error, rss_error)
        self.max_basis_error = max(self.max_basis_error, basis_error)

    @property
    def passed(self):
        """True if every point is within config.TOLERANCES."""

        return (self.max_rss_error <= TOLERANCES.round_trip
                and self.max_basis_error <= TOLERANCES.basis)

    def __str__(self):
        return ('RSS Error over %d tests: %s\nBasis Error: %s'
                % (self.count, self.rss_error, self.basis_error))

#===============================================================================
def _steps(lower, upper, step):
    """Values lower, lower+step, ... strictly below upper.

    Values are accumulated by repeated addition, so the final value depends on
    rounding exactly as a running sum does.
    """

    values = []
    value = lower
    while value < upper:
        values.append(value)
        value += step

    return values

#===============================================================================
def check_point(eccentricity, semimajor, longitude, latitude):
    """Round-trip and dual-basis errors at a single point.

    Return:         (rss_error, basis_error)
        rss_error   root-sum-square difference between the coordinates given
                    and those recovered from the Cartesian position, with the
                    semimajor axis difference taken relative to the axis.
        basis_error root-sum-square deviation of the dot products of the
                    contravariant and covariant basis vectors from the
                    Kronecker delta.
    """

    os1 = OblateSpheroid(eccentricity, semimajor, longitude, latitude)
    os2 = OblateSpheroid.from_cartesian(eccentricity, os1.cartesian)

    # Semimajor axis error is relative
    diffs = np.array([os2.semimajor / os1.semimajor - 1.,
                      os2.longitude - os1.longitude,
                      os2.latitude  - os1.latitude])
    rss_error = np.sqrt(np.sum(diffs**2))

    covariant = np.array([v.vals for v in os1.covariant_basis()])
    contravariant = np.array([v.vals for v in os1.contravariant_basis()])
    delta = contravariant @ covariant.T - np.eye(3)
    basis_error = np.sqrt(np.sum(delta**2))

    return (float(rss_error), float(basis_error))

#===============================================================================
def check_consistency(**grid):
    """Check OblateSpheroid round trips and dual bases over a grid of points.

    Input:
        **grid      overrides for any of the attributes of config.CONSISTENCY,
                    e.g., ecc_step=0.1.

    Return:         a ConsistencyReport.
    """

    params = {}
    for key in ('ecc_min', 'ecc_max', 'ecc_step',
                'sma_min', 'sma_max', 'sma_step',
                'lat_min', 'lat_max', 'lat_step',
                'lon_min', 'lon_max', 'lon_step'):
        params[key] = grid.pop(key, getattr(CONSISTENCY, key))

    if grid:
        raise TypeError('unrecognized grid parameter(s): '
                        + ', '.join(sorted(grid.keys())))

    # Longitudes start one step in, so -pi itself is never tested
    lons = _steps(params['lon_min'] + params['lon_step'], params['lon_max'],
                  params['lon_step'])
    lats = _steps(params['lat_min'], params['lat_max'], params['lat_step'])
    smas = _steps(params['sma_min'], params['sma_max'], params['sma_step'])
    eccs = _steps(params['ecc_min'], params['ecc_max'], params['ecc_step'])

    report = ConsistencyReport()
    for ecc in eccs:
        for sma in smas:
            for lat in lats:
                for lon in lons:
                    report.add(*check_point(ecc, sma, lon, lat))

        if LOGGING.consistency:
            LOGGING.diagnostic('check_consistency(): eccentricity=%.3f; '
                               'count=%d; rss=%.6g; basis=%.6g'
                               % (ecc, report.count, report.rss_error,
                                  report.basis_error))

    return report

################################################################################
