################################################################################
# oblsph/gnuplot.py: Gnuplot command files for oblate spheroids
################################################################################

from polymath import Vector3

# Colors of the first, second and third basis vectors
BASIS_COLORS = ('red', 'green', 'blue')

PLOT_TYPES = ('covariant', 'contravariant')

def gp_arrow(origin, destination, rgb):
    """Gnuplot command to draw an arrow from one Cartesian point to another.

    Input:
        origin          Vector3 or 3-tuple for the tail of the arrow.
        destination     Vector3 or 3-tuple for the head of the arrow.
        rgb             a Gnuplot color name or "#rrggbb" string.

    Return:             the command as a string, without a trailing newline.
                        The line width is fixed at 3.
    """

    (x0, y0, z0) = Vector3.as_vector3(origin, recursive=False).vals
    (x1, y1, z1) = Vector3.as_vector3(destination, recursive=False).vals

    return ('set arrow from %.3e, %.3e, %.3e to %.3e, %.3e, %.3e lw 3 lc rgb "%s"'
            % (x0, y0, z0, x1, y1, z1, rgb))

#===============================================================================
def gp_plot_basis(f, origin, basis):
    """Write arrows for three basis vectors sharing the same origin.

    The vectors are colored red, green and blue in order.

    Input:
        f               an open, writable text file.
        origin          Vector3 at the tail of every arrow.
        basis           a tuple of three Vector3 objects.
    """

    origin = Vector3.as_vector3(origin, recursive=False)
    for (vector, rgb) in zip(basis, BASIS_COLORS):
        f.write('\n')
        f.write(gp_arrow(origin, origin + vector, rgb))

#===============================================================================
def plot_spheroid(spheroid, prefix, plot_types=()):
    """Write a Gnuplot command file for an OblateSpheroid.

    The spheroid surface is always plotted. Basis vectors at the spheroid's
    point are added for each requested plot type.

    Input:
        spheroid        the OblateSpheroid to plot.
        prefix          file path without extension; ".gp" is appended.
        plot_types      any of "covariant" and "contravariant".

    Return:             the path of the file written.
    """

    for plot_type in plot_types:
        if plot_type not in PLOT_TYPES:
            raise ValueError('unrecognized plot type: ' + repr(plot_type))

    filepath = prefix + '.gp'
    with open(filepath, 'w') as f:
        f.write('set title "Oblate Spheroid"')
        f.write('\nset parametric')
        f.write('\nset isosamples 25')
        f.write('\nsplot [-pi:pi][-pi/2:pi/2]')
        f.write(' %.3e*cos(u)*cos(v)' % spheroid.semimajor)
        f.write(', %.3e*sin(u)*cos(v)' % spheroid.semimajor)
        f.write(', %.3e*sin(v)' % spheroid.semiminor)

        for plot_type in plot_types:
            if plot_type == 'covariant':
                basis = spheroid.covariant_basis()
            else:
                basis = spheroid.contravariant_basis()

            gp_plot_basis(f, spheroid.cartesian, basis)

        f.write('\nset view equal xyz\n')

    return filepath

################################################################################
