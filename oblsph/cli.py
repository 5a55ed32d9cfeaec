################################################################################
# oblsph/cli.py: Command-line program for oblate spheroidal coordinates
################################################################################
"""Builds an OblateSpheroid from command-line arguments and prints it.

Optionally, a Gnuplot command file showing the spheroid and its basis vectors
is written, and/or the grid self-consistency check is run.

Example:
    oblsph -e 0.4 -a 2 --longitude 30 --latitude 0.5 -p myplot --covariant
"""

import argparse
import logging
import sys

from oblsph.config          import LOGGING
from oblsph.consistency     import check_consistency
from oblsph.constants       import RPD
from oblsph.gnuplot         import plot_spheroid
from oblsph.oblate_spheroid import OblateSpheroid, OblateSpheroidError

def _parser():

    parser = argparse.ArgumentParser(prog='oblsph',
                    description='Oblate spheroidal coordinate utility.')

    gr = parser.add_argument_group('Coordinates')
    gr.add_argument('-e', '--eccentricity', type=float, default=0.,
                    metavar='ECC',
                    help='Eccentricity of the spheroid, 0 <= ECC < 1; default '
                         '0.')
    gr.add_argument('-a', '--semimajor', type=float, default=1.,
                    metavar='SMA',
                    help='Semimajor axis of the spheroid; default 1.')
    gr.add_argument('--longitude', type=float, default=0., metavar='DEG',
                    help='''Longitude in degrees, -180 < DEG <= 180; default
                            0.''')
    gr.add_argument('--latitude', type=float, default=0., metavar='ETA',
                    help='''Latitude as a fraction of the polar height,
                            -1 <= ETA <= 1; default 0.''')

    gr = parser.add_argument_group('Plot options')
    gr.add_argument('-p', '--plot-prefix', type=str, default='',
                    metavar='PREFIX', dest='plot_prefix',
                    help='''Write a Gnuplot command file named PREFIX.gp. If
                            omitted, no file is written.''')
    gr.add_argument('--covariant', dest='plot_types', action='append_const',
                    const='covariant',
                    help='Include the covariant basis vectors in the plot.')
    gr.add_argument('--contravariant', dest='plot_types',
                    action='append_const', const='contravariant',
                    help='Include the contravariant basis vectors in the plot.')

    gr = parser.add_argument_group('Checks')
    gr.add_argument('--check', action='store_true', default=False,
                    help='''Run the round-trip and basis consistency check over
                            the default grid of coordinates. This takes
                            roughly fifteen minutes.''')

    gr = parser.add_argument_group('Logging options')
    gr.add_argument('--log', type=str, default='', metavar='FILE',
                    help='Also write log information to FILE.')
    gr.add_argument('-q', '--quiet', action='store_true', default=False,
                    help='Do not write log information to the terminal.')
    gr.add_argument('--diagnostics', action='store_true', default=False,
                    help='Include diagnostic information in the log.')

    return parser

#===============================================================================
def main(argv=None):
    """Run the program; return the exit status."""

    args = _parser().parse_args(argv)

    handler = None
    LOGGING.push()
    try:
        if args.log:
            try:
                handler = logging.FileHandler(args.log, mode='w')
            except OSError as e:
                LOGGING.error('Log file not opened:', e)
                return 1

            logger = logging.Logger('oblsph')
            logger.addHandler(handler)
            LOGGING.set_logger(logger)

        if args.quiet:
            LOGGING.set_stdout(False)
            LOGGING.set_stderr(True)
            if not args.log:
                LOGGING.set_logger_level('error')
        if args.diagnostics:
            LOGGING.on()

        try:
            spheroid = OblateSpheroid(args.eccentricity, args.semimajor,
                                      RPD * args.longitude, args.latitude)
        except OblateSpheroidError as e:
            LOGGING.error('OblateSpheroid construction failed:', e)
            return 1

        print('OblateSpheroid', spheroid)

        if args.plot_prefix:
            print('Semiminor', spheroid.semiminor)
            try:
                filepath = plot_spheroid(spheroid, args.plot_prefix,
                                         args.plot_types or ())
            except OSError as e:
                LOGGING.error('Plot not written:', e)
                return 1

            print('Generated file', filepath)

        if args.check:
            report = check_consistency()
            print(report)
            if not report.passed:
                LOGGING.error('Consistency check failed')
                return 1

        return 0

    finally:
        LOGGING.pop()
        if handler:
            handler.close()

################################################################################

if __name__ == '__main__':
    sys.exit(main())

################################################################################
