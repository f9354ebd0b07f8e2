import unittest
import torch
import numpy as np
from lazyreach import zonotope, interval, LinearMap, DEFAULT_OPTS

class TestZonotope(unittest.TestCase):
    def setUp(self):
        self.Z = zonotope(torch.tensor([[1.0, 0.0], [1.0, 0.0], [0.0, 2.0], [1.0, 1.0]], dtype=torch.double))

    def test_properties(self):
        self.assertEqual(self.Z.dimension, 2)
        self.assertEqual(self.Z.n_generators, 3)
        self.assertTrue(torch.equal(self.Z.center, torch.tensor([1.0, 0.0], dtype=torch.double)))
        self.assertEqual(self.Z.generators.shape, (3, 2))
        with self.assertRaises(AssertionError):
            zonotope(torch.ones(3))

    def test_support_vector(self):
        sv = self.Z.support_vector([1.0, 1.0])
        self.assertTrue(torch.allclose(sv, torch.tensor([3.0, 3.0], dtype=torch.double)))
        sv = self.Z.support_vector([1.0, -1.0])
        # the last generator is orthogonal to the direction and does not contribute
        self.assertTrue(torch.allclose(sv, torch.tensor([2.0, -2.0], dtype=torch.double)))
        self.assertTrue(torch.allclose(self.Z.support_vector([0.0, 0.0]), self.Z.center))

    def test_membership(self):
        self.assertTrue(self.Z.membership([1.0, 0.0]))
        self.assertTrue(self.Z.membership([3.0, 3.0]))
        self.assertTrue([2.0, 2.5] in self.Z)
        self.assertFalse(self.Z.membership([3.5, 0.0]))
        self.assertFalse(self.Z.membership([-1.5, -3.0]))
        point = zonotope(torch.tensor([[1.0, 2.0]], dtype=torch.double))
        self.assertTrue(point.membership([1.0, 2.0]))
        self.assertFalse(point.membership([1.0, 2.5]))

    def test_to_interval(self):
        I = self.Z.to_interval()
        self.assertIsInstance(I, interval)
        self.assertTrue(torch.allclose(I.inf, torch.tensor([-1.0, -3.0], dtype=torch.double)))
        self.assertTrue(torch.allclose(I.sup, torch.tensor([3.0, 3.0], dtype=torch.double)))

    def test_linear_map(self):
        M = torch.tensor([[0.0, 1.0], [2.0, 0.0]], dtype=torch.double)
        MZ = M@self.Z
        # a zonotope is mapped exactly
        self.assertIsInstance(MZ, zonotope)
        self.assertTrue(torch.allclose(MZ.center, torch.tensor([0.0, 2.0], dtype=torch.double)))
        lazy = LinearMap(M, self.Z)
        d = torch.tensor([0.3, -0.7], dtype=torch.double)
        self.assertTrue(torch.allclose(lazy.support_function(d), MZ.support_function(d)))

    def test_numpy_linear_map(self):
        M = np.array([[0.0, 1.0], [2.0, 0.0]])
        MZ = M@self.Z
        self.assertIsInstance(MZ, zonotope)
        self.assertEqual(MZ.dtype, torch.double)
        self.assertTrue(torch.allclose(MZ.center, torch.tensor([0.0, 2.0], dtype=torch.double)))
        self.assertTrue(torch.allclose(MZ.generators, torch.tensor([[0.0, 2.0], [2.0, 0.0], [1.0, 2.0]], dtype=torch.double)))
        # a float matrix takes the data type of the zonotope
        MZ = torch.tensor([[1.0, 0.0], [0.0, 1.0]], dtype=torch.float)@self.Z
        self.assertEqual(MZ.dtype, torch.double)

    def test_default_dtype(self):
        Z = zonotope([[1.0, 0.0], [1.0, 0.0]])
        self.assertEqual(Z.dtype, DEFAULT_OPTS.DTYPE)
        self.assertEqual(zonotope([[1, 0], [0, 1]]).dtype, DEFAULT_OPTS.DTYPE)
        self.assertEqual(zonotope(torch.ones(2, 2, dtype=torch.float)).dtype, torch.float)

if __name__ == '__main__':
    unittest.main()
