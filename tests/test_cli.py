################################################################################
# tests/test_cli.py
################################################################################

import contextlib
import io
import os
import tempfile
import unittest

from oblsph.cli import main


def run(argv):
    """Run the program; return (status, stdout lines)."""

    stdout = io.StringIO()
    with contextlib.redirect_stdout(stdout):
        status = main(argv)

    return (status, stdout.getvalue().splitlines())


class Test_cli(unittest.TestCase):

    def runTest(self):

        # Defaults
        (status, lines) = run([])
        self.assertEqual(status, 0)
        self.assertEqual(lines, ['OblateSpheroid (Eccentricity: 0.0; '
                                 'Semimajor: 1.0; Azimuth: 0.0; '
                                 'Elevation: 0.0)'])

        (status, lines) = run(['-e', '0.4', '-a', '2', '--latitude', '0.5'])
        self.assertEqual(status, 0)
        self.assertEqual(lines, ['OblateSpheroid (Eccentricity: 0.4; '
                                 'Semimajor: 2.0; Azimuth: 0.0; '
                                 'Elevation: 0.5)'])

        # Longitude is given in degrees
        (status, lines) = run(['--longitude', '-90'])
        self.assertEqual(status, 0)
        self.assertIn('Azimuth: -90', lines[0])

        # Validation failures
        (status, lines) = run(['-e', '1.5'])
        self.assertEqual(status, 1)
        self.assertEqual(len(lines), 1)
        self.assertIn('ERROR:', lines[0])
        self.assertIn('Invalid Eccentricity: 1.5', lines[0])

        (status, lines) = run(['--longitude', '270'])
        self.assertEqual(status, 1)
        self.assertIn('Invalid Longitude: 270', lines[0])

        (status, lines) = run(['--latitude', '-2'])
        self.assertEqual(status, 1)
        self.assertIn('Invalid Latitude: -2.0', lines[0])

        # Plot file
        with tempfile.TemporaryDirectory() as dirpath:
            prefix = os.path.join(dirpath, 'os')
            (status, lines) = run(['-e', '0.6', '-a', '2', '-p', prefix,
                                   '--covariant', '--contravariant'])
            self.assertEqual(status, 0)
            self.assertEqual(len(lines), 3)
            self.assertTrue(lines[1].startswith('Semiminor 1.6'))
            self.assertEqual(lines[2], 'Generated file ' + prefix + '.gp')

            with open(prefix + '.gp') as f:
                text = f.read()
            self.assertEqual(text.count('set arrow'), 6)

            # Unwritable location
            prefix = os.path.join(dirpath, 'missing', 'os')
            (status, lines) = run(['-p', prefix])
            self.assertEqual(status, 1)
            self.assertIn('ERROR:', lines[-1])
            self.assertIn('Plot not written', lines[-1])

        # Log file
        with tempfile.TemporaryDirectory() as dirpath:
            logpath = os.path.join(dirpath, 'oblsph.log')
            (status, lines) = run(['--log', logpath, '-e', '1.5'])
            self.assertEqual(status, 1)
            self.assertIn('Invalid Eccentricity: 1.5', lines[0])

            with open(logpath) as f:
                records = f.read().splitlines()
            self.assertEqual(len(records), 1)
            self.assertIn(' | ERROR   | OblateSpheroid construction failed:',
                          records[0])

            (status, lines) = run(['--log', logpath])
            self.assertEqual(status, 0)
            with open(logpath) as f:
                self.assertEqual(f.read(), '')

            # Unwritable log location
            logpath = os.path.join(dirpath, 'missing', 'oblsph.log')
            (status, lines) = run(['--log', logpath])
            self.assertEqual(status, 1)
            self.assertIn('Log file not opened', lines[-1])

########################################
if __name__ == '__main__':
    unittest.main(verbosity=2)
################################################################################
