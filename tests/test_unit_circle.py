################################################################################
# tests/test_unit_circle.py
################################################################################

import numpy as np
import unittest

from polymath           import Pair
from oblsph.unit_circle import tangent


class Test_unit_circle(unittest.TestCase):

    def runTest(self):

        np.random.seed(4812)

        # Known solution
        pos = Pair((0.354799500241270, -1.570944720424161))
        pnt = Pair((-7.327042094401748e-02, -1.170312541765953e+00))
        tp = tangent(pos, pnt)
        self.assertIsInstance(tp, Pair)

        expected = np.array([-0.627824961922289, -0.778354557504019])
        self.assertTrue(np.sqrt(np.sum((tp.vals - expected)**2)) < 1.e-10)

        # Tuples are accepted
        tp = tangent((0.354799500241270, -1.570944720424161),
                     (-7.327042094401748e-02, -1.170312541765953e+00))
        self.assertTrue(np.sqrt(np.sum((tp.vals - expected)**2)) < 1.e-10)

        # The two tangent points from (0,2), chosen by the pointing vector
        half_sqrt3 = np.sqrt(3.) / 2.
        tp = tangent((0., 2.), (-1., 0.))
        self.assertTrue(np.all(np.abs(tp.vals - (-half_sqrt3, 0.5)) < 1.e-15))

        tp = tangent((0., 2.), (1., 0.))
        self.assertTrue(np.all(np.abs(tp.vals - (half_sqrt3, 0.5)) < 1.e-15))

        # Positions off the Y-axis
        tp = tangent((2., 0.), (0., 1.))
        self.assertTrue(np.all(np.abs(tp.vals - (0.5, half_sqrt3)) < 1.e-15))

        tp = tangent((-2., 0.), (0.3, -1.))
        self.assertTrue(np.all(np.abs(tp.vals - (-0.5, -half_sqrt3)) < 1.e-15))

        # Inputs are left unchanged
        pos = Pair((3., 4.))
        pnt = Pair((1., -1.))
        tp = tangent(pos, pnt)
        self.assertEqual(tuple(pos.vals), (3., 4.))
        self.assertEqual(tuple(pnt.vals), (1., -1.))

        # Scale of the pointing vector is irrelevant
        tp = tangent((0., 2.), (-1.e-6, -5.))
        self.assertTrue(np.all(np.abs(tp.vals - (-half_sqrt3, 0.5)) < 1.e-15))

        # Random exterior positions and pointing vectors
        for k in range(200):
            r = 1.01 + 10. * np.random.rand()
            theta = 2. * np.pi * np.random.rand()
            pos = np.array([r * np.cos(theta), r * np.sin(theta)])
            pnt = np.random.randn(2)

            tp = tangent(pos, pnt).vals

            # On the unit circle
            self.assertTrue(abs(np.sum(tp**2) - 1.) < 1.e-13)

            # Line of sight is perpendicular to the radius at the tangent point
            self.assertTrue(abs(np.dot(pos - tp, tp)) < 1.e-12 * r)

            # Tangent point is on the same side as the pointing vector
            rhat_orth = np.array([-pos[1], pos[0]])
            self.assertEqual(np.dot(tp, rhat_orth) > 0.,
                             np.dot(pnt, rhat_orth) > 0.)

        # Positions on or inside the circle return the radial projection
        for pnt in [(1.,0.), (0.,-1.), (-3.,7.)]:
            tp = tangent((0.3, 0.4), pnt)
            self.assertTrue(np.all(np.abs(tp.vals - (0.6, 0.8)) < 1.e-15))

            tp = tangent((0., -1.), pnt)
            self.assertTrue(np.all(np.abs(tp.vals - (0., -1.)) < 1.e-15))

        for k in range(50):
            pos = np.random.rand(2) - 0.5
            pnt = np.random.randn(2)
            tp = tangent(pos, pnt).vals
            self.assertTrue(np.all(np.abs(tp - pos / np.sqrt(np.sum(pos**2)))
                                   < 1.e-15))

########################################
if __name__ == '__main__':
    unittest.main(verbosity=2)
################################################################################
