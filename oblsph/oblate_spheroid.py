################################################################################
# oblsph/oblate_spheroid.py: OblateSpheroid coordinate class
################################################################################

import numpy as np

from polymath           import Matrix, Matrix3, Vector3
from oblsph.config      import LOGGING
from oblsph.constants   import DPR, PI
from oblsph.unit_circle import tangent

class OblateSpheroidError(ValueError):
    """Raised when an OblateSpheroid is given an out-of-range parameter.

    Attributes:
        parameter   name of the offending parameter: "eccentricity",
                    "semimajor", "longitude" or "latitude".
        value       the rejected value, in the units used in the message;
                    longitudes are reported in degrees.
    """

    LABELS = {
        'eccentricity': 'Eccentricity',
        'semimajor'   : 'Semimajor Axis',
        'longitude'   : 'Longitude',
        'latitude'    : 'Latitude',
    }

    def __init__(self, parameter, value):
        self.parameter = parameter
        self.value = value
        ValueError.__init__(self, 'Invalid %s: %s'
                                  % (OblateSpheroidError.LABELS[parameter],
                                     value))

class OblateSpheroid(object):
    """A point in oblate spheroidal coordinates.

    The spheroid is defined by its eccentricity e and semimajor axis a, with
    the short (semiminor) axis along Z. The remaining two coordinates locate a
    point on that spheroid:
        longitude   the angle lambda in radians from the X-axis, measured in a
                    right-handed sense about Z; -pi < lambda <= pi.
        latitude    the fraction eta of the polar height above the equator;
                    -1 <= eta <= 1. This is not an angle: +1 is the north pole
                    and 0 is the equatorial plane.

    The Cartesian position of the point is cached alongside these coordinates.
    Objects are immutable; use with_coordinates() or with_cartesian() to obtain
    a new point.
    """

    #===========================================================================
    def __init__(self, eccentricity=0., semimajor=1., longitude=0.,
                       latitude=0.):
        """Constructor for an OblateSpheroid from oblate spheroidal coordinates.

        With no arguments, this is the point (1,0,0) on the unit sphere. With
        only the eccentricity and semimajor axis, the point lies on the X-axis.

        Input:
            eccentricity    eccentricity of the spheroid, 0 <= e < 1.
            semimajor       semimajor axis of the spheroid, a >= 0.
            longitude       longitude in radians, -pi < lambda <= pi.
            latitude        latitude fraction, -1 <= eta <= 1.

        Raises:             OblateSpheroidError if any value is out of range.
        """

        OblateSpheroid._validate_eccentricity(eccentricity)

        if not (semimajor >= 0.):
            raise OblateSpheroidError('semimajor', semimajor)

        if not (-PI < longitude <= PI):
            raise OblateSpheroidError('longitude', DPR * longitude)

        if not (-1. <= latitude <= 1.):
            raise OblateSpheroidError('latitude', latitude)

        self._ecc = float(eccentricity)
        self._sma = float(semimajor)
        self._lon = float(longitude)
        self._lat = float(latitude)

        sqometa2 = np.sqrt(1. - self._lat**2)
        sqome2 = np.sqrt(1. - self._ecc**2)

        xyz = np.array([self._sma * sqometa2 * np.cos(self._lon),
                        self._sma * sqometa2 * np.sin(self._lon),
                        self._sma * self._lat * sqome2])
        self._xyz = Vector3(xyz).as_readonly()

    #===========================================================================
    @staticmethod
    def from_cartesian(eccentricity, cartesian):
        """Constructor for an OblateSpheroid from a Cartesian position.

        The semimajor axis is that of the spheroid of the given eccentricity
        passing through the point.

        Input:
            eccentricity    eccentricity of the spheroid, 0 <= e < 1.
            cartesian       a Vector3, or anything convertible to one, giving
                            the position relative to the spheroid center.

        Raises:             OblateSpheroidError if the eccentricity is out of
                            range.
        """

        OblateSpheroid._validate_eccentricity(eccentricity)

        cartesian = Vector3.as_vector3(cartesian, recursive=False)
        (x, y, z) = cartesian.vals

        ome2 = 1. - eccentricity**2
        sma = np.sqrt(x**2 + y**2 + z**2 / ome2)
        lon = np.arctan2(y, x)
        lat = z / (sma * np.sqrt(ome2))

        # atan2 returns -pi on the negative X-axis when y is -0.
        if lon == -PI:
            lon = PI

        result = OblateSpheroid.__new__(OblateSpheroid)
        result._ecc = float(eccentricity)
        result._sma = float(sma)
        result._lon = float(lon)
        result._lat = float(lat)
        result._xyz = Vector3(np.array(cartesian.vals, dtype='float')
                              ).as_readonly()

        return result

    @staticmethod
    def _validate_eccentricity(eccentricity):
        if not (0. <= eccentricity < 1.):
            raise OblateSpheroidError('eccentricity', eccentricity)

    #===========================================================================
    def with_coordinates(self, longitude=None, latitude=None):
        """A new point on this spheroid at the given longitude and latitude.

        Either coordinate can be omitted to keep its current value.
        """

        if longitude is None:
            longitude = self._lon
        if latitude is None:
            latitude = self._lat

        return OblateSpheroid(self._ecc, self._sma, longitude, latitude)

    #===========================================================================
    def with_cartesian(self, cartesian):
        """A new point with this eccentricity at the given Cartesian position.
        """

        return OblateSpheroid.from_cartesian(self._ecc, cartesian)

    ############################################################################
    # Accessors
    ############################################################################

    @property
    def eccentricity(self):
        return self._ecc

    @property
    def semimajor(self):
        return self._sma

    @property
    def semiminor(self):
        """Semiminor (polar) axis, a * sqrt(1 - e^2)."""

        return self._sma * np.sqrt(1. - self._ecc**2)

    @property
    def longitude(self):
        """Longitude in radians."""

        return self._lon

    @property
    def latitude(self):
        """Latitude fraction; not an angle."""

        return self._lat

    @property
    def cartesian(self):
        """Cartesian position as a read-only Vector3."""

        return self._xyz

    ############################################################################
    # Differential geometry
    ############################################################################

    def _jacobian_array(self):

        a = self._sma
        eta = self._lat
        sqome2 = np.sqrt(1. - self._ecc**2)
        sqometa2 = np.sqrt(1. - eta**2)
        cl = np.cos(self._lon)
        sl = np.sin(self._lon)

        # Columns are d/da, d/dlambda, d/deta
        return np.array([[sqometa2 * cl, -a * sqometa2 * sl, -a*eta*cl/sqometa2],
                         [sqometa2 * sl,  a * sqometa2 * cl, -a*eta*sl/sqometa2],
                         [eta * sqome2,   0.,                 a * sqome2       ]])

    def _inverse_jacobian_array(self):

        a = self._sma
        ome2 = 1. - self._ecc**2
        sqome2 = np.sqrt(ome2)
        (x, y, z) = self._xyz.vals

        rho2 = x**2 + y**2              # squared distance from the polar axis
        a3sqome2 = a**3 * sqome2

        # Rows are grad(a), grad(lambda), grad(eta)
        return np.array([[x / a,             y / a,             z / (a * ome2)],
                         [-y / rho2,         x / rho2,          0.            ],
                         [-x * z / a3sqome2, -y * z / a3sqome2, rho2 / a3sqome2]])

    #===========================================================================
    def jacobian(self):
        """The Matrix of partial derivatives d(x,y,z)/d(a,lambda,eta).

        Column j contains the derivatives of the Cartesian position with respect
        to oblate spheroidal coordinate j.
        """

        return Matrix(self._jacobian_array())

    #===========================================================================
    def inverse_jacobian(self):
        """The Matrix of partial derivatives d(a,lambda,eta)/d(x,y,z).

        This is the matrix inverse of jacobian(). It is undefined on the polar
        axis and at the origin.
        """

        return Matrix(self._inverse_jacobian_array())

    #===========================================================================
    def covariant_basis(self):
        """The covariant basis vectors (dr/da, dr/dlambda, dr/deta).

        Return:         a tuple of three Vector3 objects, the columns of the
                        Jacobian. The first is always parallel to the position
                        vector.
        """

        return tuple(Vector3(column) for column in self._jacobian_array().T)

    #===========================================================================
    def contravariant_basis(self):
        """The contravariant basis vectors (grad a, grad lambda, grad eta).

        Return:         a tuple of three Vector3 objects, the rows of the
                        inverse Jacobian. Contravariant vector i dotted into
                        covariant vector j is the Kronecker delta.
        """

        return tuple(Vector3(row) for row in self._inverse_jacobian_array())

    #===========================================================================
    def covariant_metric(self):
        """The covariant metric tensor g_ij as a symmetric Matrix.

        The longitude axis decouples; the only off-diagonal terms couple the
        semimajor axis and the latitude.
        """

        a = self._sma
        e2 = self._ecc**2
        eta = self._lat
        eta2 = eta**2
        ometa2 = 1. - eta2

        g_aa = 1. - e2 * eta2
        g_ae = -a * eta * e2
        g_ll = a**2 * ometa2
        g_ee = a**2 * (eta2 / ometa2 + 1. - e2)

        return Matrix([[g_aa, 0.,   g_ae],
                        [0.,   g_ll, 0.  ],
                        [g_ae, 0.,   g_ee]])

    #===========================================================================
    def contravariant_metric(self):
        """The contravariant metric tensor g^ij, inverse of covariant_metric().
        """

        a = self._sma
        e2 = self._ecc**2
        ome2 = 1. - e2
        eta = self._lat
        eta2 = eta**2
        ometa2 = 1. - eta2

        g_aa = (eta2 + ome2 * ometa2) / ome2
        g_ae = eta * e2 * ometa2 / (a * ome2)
        g_ll = 1. / (a**2 * ometa2)
        g_ee = (1. - e2 * eta2) * ometa2 / (a**2 * ome2)

        return Matrix([[g_aa, 0.,   g_ae],
                        [0.,   g_ll, 0.  ],
                        [g_ae, 0.,   g_ee]])

    #===========================================================================
    def volume_element(self):
        """The square root of the determinant of the metric, a^2 sqrt(1-e^2).
        """

        return self._sma**2 * np.sqrt(1. - self._ecc**2)

    ############################################################################
    # Surface geometry
    ############################################################################

    def surface_tangent(self, pos, pnt):
        """The surface point where a line of sight from pos grazes the spheroid.

        The spheroid is scaled to a unit sphere. The plane containing the scaled
        position and pointing vectors passes through the center of the sphere,
        so within that plane the problem reduces to finding the tangent point
        on a unit circle. The solution is rotated back out of the plane and
        scaled back to the spheroid.

        Input:
            pos         a Vector3 position relative to the spheroid center.
            pnt         a Vector3 pointing vector from pos. Of the tangent
                        points in the plane of pos and pnt, the one on the side
                        of pnt is returned.

        Return:         a Vector3 on the surface of the spheroid defined by this
                        object's eccentricity and semimajor axis. If pos is
                        inside the spheroid, the radial projection of pos onto
                        the surface is returned instead.

        Raises:         OblateSpheroidError if the semimajor axis is zero.
        """

        if not (self._sma > 0.):
            raise OblateSpheroidError('semimajor', self._sma)

        pos = Vector3.as_vector3(pos, recursive=False)
        pnt = Vector3.as_vector3(pnt, recursive=False)

        # Oblate spheroid to unit sphere affine transformation, and back
        a = self._sma
        c = self.semiminor
        to_sphere   = Matrix(np.diag([1./a, 1./a, 1./c]))
        from_sphere = Matrix(np.diag([a, a, c]))

        sphere_pos = to_sphere * pos
        sphere_pnt = to_sphere * pnt

        if LOGGING.degenerate_tangents:
            if float(sphere_pos.norm_sq().vals) <= 1.:
                LOGGING.diagnostic('OblateSpheroid.surface_tangent(): '
                                   'position inside spheroid', pos.vals)

        # Rows are the unit vectors of a frame with Y along the position and Z
        # normal to the plane of the position and pointing vectors
        frame = Matrix3.twovec(sphere_pos, 1, sphere_pos.cross(sphere_pnt), 2)

        plane_pos = (frame * sphere_pos).vals[:2]
        plane_pnt = (frame * sphere_pnt).vals[:2]
        plane_cept = tangent(plane_pos, plane_pnt).vals

        plane_cept = Vector3((plane_cept[0], plane_cept[1], 0.))
        cept = from_sphere * (frame.T * plane_cept)

        if LOGGING.surface_tangents:
            LOGGING.diagnostic('OblateSpheroid.surface_tangent():',
                               pos.vals, pnt.vals, '->', cept.vals)

        return cept

    ############################################################################
    # Display
    ############################################################################

    def __str__(self):
        return ('(Eccentricity: %s; Semimajor: %s; Azimuth: %s; Elevation: %s)'
                % (self._ecc, self._sma, DPR * self._lon, self._lat))

    def __repr__(self):
        return ('OblateSpheroid(%r, %r, %r, %r)'
                % (self._ecc, self._sma, self._lon, self._lat))

################################################################################
