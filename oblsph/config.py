################################################################################
# oblsph/config.py: General configuration parameters
################################################################################

import datetime
import logging
import sys

from oblsph.constants import RPD

################################################################################
# Grid used by oblsph.consistency.check_consistency()
#
# Every combination of eccentricity, semimajor axis, latitude and longitude on
# this grid is converted to Cartesian coordinates and back. The upper limits are
# exclusive. Longitudes start one step above the lower limit so that -pi, which
# is outside the valid range, is never used.
################################################################################

class CONSISTENCY(object):
    ecc_min  = 0.                   # Eccentricity range and step.
    ecc_max  = 0.9
    ecc_step = 0.05

    sma_min  = 0.1                  # Semimajor axis range and step.
    sma_max  = 7.5
    sma_step = 0.1

    lat_min  = -0.9                 # Latitude fraction range and step.
    lat_max  = 0.9
    lat_step = 0.05

    lon_min  = -180. * RPD          # Longitude range and step in radians.
    lon_max  =  180. * RPD
    lon_step =    3. * RPD

################################################################################
# Numerical tolerances
################################################################################

class TOLERANCES(object):
    round_trip = 1.e-10             # Error allowed on (a/a0, lon, lat) after a
                                    # trip through Cartesian coords.
    identity = 1.e-13               # Squared Frobenius norm allowed between a
                                    # product of inverse matrices and the
                                    # identity.
    basis = 1.e-13                  # Allowed deviation of the dot products of
                                    # dual basis vectors from the Kronecker
                                    # delta.

################################################################################
# Logging
#
# Messages go to stdout and/or stderr, and/or to a Python logger. A log file is
# written by giving the logger a logging.FileHandler.
################################################################################

LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'
LOG_FORMATTER = logging.Formatter('%(mytime)s | %(mylevelname)-7s | '
                                  '%(message)s')

LOGGING_STACK = []

class LOGGING(object):
    prefix = '   '                  # Prefix in front of a log message
    surface_tangents = False        # Log every surface tangent solution
    degenerate_tangents = False     # Log tangents from inside the spheroid
    consistency = False             # Log progress of consistency checks

    stdout = True                   # Write logging info to stdout.
    stderr = False                  # Write logging info to stderr.
    logger = None                   # Python logger object.
    level = logging.DEBUG           # Minimum logging level.
    warnings = 0                    # Warning count.
    errors = 0                      # Error count.
    lines = 0                       # Number of lines logged.

    LEVELS = {
        'debug'   : logging.DEBUG,
        'info'    : logging.INFO,
        'warning' : logging.WARNING,
        'error'   : logging.ERROR,
    }

    @staticmethod
    def reset():
        """Reset error and warning counts to zero."""

        LOGGING.warnings = 0
        LOGGING.errors = 0
        LOGGING.lines = 0

    @staticmethod
    def all(flag, category='', reset=False):
        """Turn one or more categories of messages on or off."""

        if not category or 'tangents' in category:
            LOGGING.surface_tangents = flag
            LOGGING.degenerate_tangents = flag

        if not category or 'consistency' in category:
            LOGGING.consistency = flag

        if reset:
            LOGGING.reset()

        # Never allow stdout=False if other logging methods are off
        if flag and not (LOGGING.logger or LOGGING.stderr):
            LOGGING.stdout = True

    @staticmethod
    def off(category='', reset=True):
        LOGGING.all(False, category=category, reset=reset)

    @staticmethod
    def on(prefix='   ', category='', reset=False):
        LOGGING.all(True, category=category, reset=reset)
        LOGGING.prefix = prefix

    @staticmethod
    def set_stdout(flag):
        LOGGING.stdout = bool(flag)

    @staticmethod
    def set_stderr(flag):
        LOGGING.stderr = bool(flag)
        if not (LOGGING.logger or LOGGING.stderr):
            LOGGING.stdout = True

    @staticmethod
    def set_logger(logger=None, level='debug'):
        """Send log messages to a logger; None to disable Python logging.

        Each of the logger's handlers is given the oblsph formatter.
        """

        LOGGING.logger = logger

        if logger is None:
            LOGGING.stdout = LOGGING.stdout or not LOGGING.stderr
            LOGGING.level = logging.DEBUG
            return

        for handler in logger.handlers:
            handler.setFormatter(LOG_FORMATTER)

        LOGGING.set_logger_level(level)

    @staticmethod
    def set_logger_level(level):
        """Set the minimum level of messages to be logged."""

        if isinstance(level, str):
            level = LOGGING.LEVELS[level.lower()]

        if LOGGING.logger:
            LOGGING.logger.setLevel(level)
        LOGGING.level = level

    @staticmethod
    def print(*args, level=logging.INFO, literal=False, force=False):
        """Print a log message for a given log level.

        The message is constructed by converting each argument to a string, and
        then concatenating them with spaces in between.

        Inputs:
            level           logging level as an integer or one of the keys of
                            LOGGING.LEVELS.
            literal         if True, the message is logged without any level
                            label and does not update the warning and error
                            counts.
            force           log the message even if its level is below the
                            minimum.
        """

        if isinstance(level, str):
            level = LOGGING.LEVELS[level.lower()]

        if level < LOGGING.level and not force:
            return

        prefix = LOGGING.prefix
        if not literal:
            if level >= logging.ERROR:
                prefix += 'ERROR:'
                LOGGING.errors += 1
            elif level >= logging.WARNING:
                prefix += 'WARNING:'
                LOGGING.warnings += 1

        prefix_ = prefix + ' ' if prefix else ''
        message = ' '.join([str(x) for x in args])

        if LOGGING.stdout:
            sys.stdout.write(prefix_ + message + '\n')

        if LOGGING.stderr:
            sys.stderr.write(prefix_ + message + '\n')

        if LOGGING.logger:
            now = datetime.datetime.now()
            extras = {'mytime': now.strftime(LOG_DATEFMT),
                      'mylevelname': logging.getLevelName(level)}
            LOGGING.logger.log(max(level, LOGGING.level), message,
                               extra=extras)

        LOGGING.lines += 1

    @staticmethod
    def info(*args, force=False):
        LOGGING.print(*args, level=logging.INFO, force=force)

    @staticmethod
    def warn(*args, force=False):
        LOGGING.print(*args, level=logging.WARNING, force=force)

    @staticmethod
    def error(*args, force=False):
        LOGGING.print(*args, level=logging.ERROR, force=force)

    @staticmethod
    def diagnostic(*args, force=False):
        """Print a diagnostic message, without a level label."""
        LOGGING.print(*args, level=logging.DEBUG, literal=True, force=force)

    @staticmethod
    def push():
        """Push the current LOGGING settings onto a stack."""

        state = {}
        for key, value in LOGGING.__dict__.items():
            if not key.startswith('_') and not key.isupper() \
                    and not isinstance(value, staticmethod):
                state[key] = value

        LOGGING_STACK.append(state)

    @staticmethod
    def pop():
        """Pop the previous LOGGING settings from the stack."""

        state = LOGGING_STACK.pop()

        # The initial settings are never removed
        if not LOGGING_STACK:
            LOGGING_STACK.append(state)

        for key, value in state.items():
            setattr(LOGGING, key, value)

        if LOGGING.logger:
            LOGGING.logger.setLevel(LOGGING.level)

LOGGING.push()      # At initialization, put the default settings onto the stack

################################################################################
