import unittest
import torch
import lazyreach as lr
from lazyreach import CartesianProduct, EmptySet, interval, BallInf, HParallelotope

class TestCartesianProduct(unittest.TestCase):
    def setUp(self):
        dtype = torch.double
        self.X = interval(torch.tensor([0.0, -1.0], dtype=dtype), torch.tensor([1.0, 1.0], dtype=dtype))
        self.Y = BallInf(torch.tensor([2.0], dtype=dtype), 0.5)
        self.P = HParallelotope(torch.eye(2, dtype=dtype), torch.tensor([2.0, 3.0, 1.0, 1.0], dtype=dtype))

    def test_operator(self):
        XY = self.X * self.Y
        self.assertIsInstance(XY, CartesianProduct)
        self.assertIs(XY.X, self.X)
        self.assertIs(XY.Y, self.Y)
        self.assertEqual(XY.dimension, self.X.dimension + self.Y.dimension)
        self.assertEqual(XY.dtype, torch.double)

    def test_support_vector(self):
        XYP = self.X * self.Y * self.P
        self.assertEqual(XYP.dimension, 5)
        d = torch.tensor([1.0, -1.0, -3.0, 0.5, 2.0], dtype=torch.double)
        expected = torch.cat((self.X.support_vector(d[:2]), self.Y.support_vector(d[2:3]), self.P.support_vector(d[3:])))
        self.assertTrue(torch.allclose(XYP.support_vector(d), expected))
        self.assertTrue(torch.allclose(XYP.support_vector(d), torch.tensor([1.0, -1.0, 1.5, 2.0, 3.0], dtype=torch.double)))
        with self.assertRaises(AssertionError):
            XYP.support_vector(torch.ones(4, dtype=torch.double))

    def test_membership(self):
        XY = self.X * self.Y
        self.assertTrue(XY.membership([0.5, 0.0, 2.5]))
        self.assertFalse(XY.membership([0.5, 0.0, 2.6]))
        self.assertFalse(XY.membership([1.5, 0.0, 2.0]))
        self.assertEqual(XY.membership([1.5, 0.0, 2.6]), self.X.membership([1.5, 0.0]) and self.Y.membership([2.6]))
        self.assertTrue([1.0, 1.0, 1.5] in XY)
        with self.assertRaises(AssertionError):
            XY.membership([0.5, 0.0])

    def test_from_list(self):
        self.assertIs(CartesianProduct.from_list([], dtype=torch.double), EmptySet(torch.double))
        self.assertEqual(CartesianProduct.from_list([]).dimension, 0)
        self.assertIs(CartesianProduct.from_list([self.X]), self.X)
        XY = CartesianProduct.from_list([self.X, self.Y])
        self.assertIsInstance(XY, CartesianProduct)
        self.assertEqual(XY.dimension, 3)
        XYP = CartesianProduct.from_list([self.X, self.Y, self.P])
        # right-nested chain
        self.assertIs(XYP.X, self.X)
        self.assertIsInstance(XYP.Y, CartesianProduct)
        self.assertIs(XYP.Y.X, self.Y)
        self.assertIs(XYP.Y.Y, self.P)
        self.assertEqual(XYP.dimension, 5)

    def test_mixed_dtype(self):
        Z = interval(torch.tensor([0.0], dtype=torch.float), torch.tensor([1.0], dtype=torch.float))
        with self.assertRaises(AssertionError):
            self.X * Z
        lr.internal.__debug_extra__ = False
        try:
            self.assertEqual((self.X * Z).dimension, 3)
        finally:
            lr.internal.__debug_extra__ = True

    def test_not_a_set(self):
        with self.assertRaises(TypeError):
            self.X * 2.0

if __name__ == '__main__':
    unittest.main()
