import unittest
import torch
from lazyreach import interval, BallInf, HParallelotope, zonotope, DEFAULT_OPTS

class TestInterval(unittest.TestCase):
    def setUp(self):
        self.inf = torch.tensor([1.0, 2.0])
        self.sup = torch.tensor([3.0, 4.0])
        self.I = interval(self.inf, self.sup)

    def test_construction(self):
        self.assertEqual(self.I.dimension, 2)
        self.assertEqual(self.I.dim, 2)
        self.assertEqual(self.I.dtype, torch.float)
        P = interval(sup=torch.tensor([1.0, 2.0]))
        self.assertTrue(torch.equal(P.inf, P.sup))
        I_int = interval([0, 0], [1, 1])
        self.assertTrue(I_int.dtype.is_floating_point)
        self.assertEqual(interval([0.0, 0.0], [1.0, 1.0]).dtype, DEFAULT_OPTS.DTYPE)
        self.assertEqual(BallInf([0.0, 0.0], 1.0).dtype, DEFAULT_OPTS.DTYPE)
        with self.assertRaises(AssertionError):
            interval(torch.tensor([3.0, 0.0]), torch.tensor([1.0, 1.0]))
        with self.assertRaises(AssertionError):
            interval(torch.tensor([0.0]), torch.tensor([1.0, 1.0]))
        with self.assertRaises(AssertionError):
            interval()

    def test_center(self):
        c = self.I.center()
        self.assertTrue(torch.allclose(c, torch.tensor([2.0, 3.0])))

    def test_rad(self):
        r = self.I.rad()
        self.assertTrue(torch.allclose(r, torch.tensor([1.0, 1.0])))

    def test_support_vector(self):
        self.assertTrue(torch.equal(self.I.support_vector([1.0, -1.0]), torch.tensor([3.0, 2.0])))
        self.assertTrue(torch.equal(self.I.support_vector([-2.0, 0.5]), torch.tensor([1.0, 4.0])))
        # the zero direction gives the supremum
        self.assertTrue(torch.equal(self.I.support_vector([0.0, 0.0]), self.sup))
        self.assertTrue(torch.allclose(self.I.support_function([1.0, 1.0]), torch.tensor(7.0)))
        with self.assertRaises(AssertionError):
            self.I.support_vector([1.0, 0.0, 0.0])

    def test_membership(self):
        self.assertTrue(self.I.membership([2.0, 3.0]))
        self.assertTrue(self.I.membership([1.0, 4.0]))
        self.assertFalse(self.I.membership([0.5, 3.0]))
        self.assertTrue(torch.tensor([3.0, 2.0]) in self.I)
        self.assertFalse([3.0, 4.5] in self.I)
        with self.assertRaises(AssertionError):
            self.I.membership([1.0])

    def test_constraints_list(self):
        clist = self.I.constraints_list()
        self.assertEqual(len(clist), 4)
        self.assertTrue(torch.equal(clist[0].a, torch.tensor([1.0, 0.0])))
        self.assertTrue(torch.equal(clist[3].a, torch.tensor([0.0, -1.0])))
        self.assertEqual([c.b.item() for c in clist], [3.0, 4.0, -1.0, -2.0])

    def test_conversions(self):
        P = self.I.to_hparallelotope()
        self.assertIsInstance(P, HParallelotope)
        self.assertTrue(torch.allclose(P.base_vertex(), self.inf))
        self.assertTrue(torch.allclose(P.center(), self.I.center()))
        Z = self.I.to_zonotope()
        self.assertIsInstance(Z, zonotope)
        self.assertTrue(torch.allclose(Z.to_interval().inf, self.inf))
        self.assertTrue(torch.allclose(Z.to_interval().sup, self.sup))

    def test_ball_inf(self):
        B = BallInf(torch.tensor([0.5, -1.0], dtype=torch.double), 0.25)
        self.assertIsInstance(B, interval)
        self.assertEqual(B.dtype, torch.double)
        self.assertTrue(torch.allclose(B.inf, torch.tensor([0.25, -1.25], dtype=torch.double)))
        self.assertTrue(torch.allclose(B.sup, torch.tensor([0.75, -0.75], dtype=torch.double)))
        self.assertEqual(B.radius.item(), 0.25)
        self.assertTrue(B.membership([0.75, -1.25]))
        self.assertFalse(B.membership([0.8, -1.0]))
        with self.assertRaises(AssertionError):
            BallInf([0.0, 0.0], -1.0)

if __name__ == '__main__':
    unittest.main()
