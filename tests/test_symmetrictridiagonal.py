import unittest
from itertools import product

from symeig import SymmetricTridiagonal
from utils import backends, rand_symmetric, max_abs

class TestSymmetricTridiagonal(unittest.TestCase):

    def setUp(self):
        self.sizes = [1, 2, 3, 8, 33]

    def test_decompose(self):
        for xp, size in product(backends, self.sizes):
            mat = rand_symmetric(xp, size)
            res = SymmetricTridiagonal()(mat)

            self.assertEqual(res.diag.shape, (size,))
            self.assertEqual(res.off_diag.shape, (size-1,))
            self.assertLess(max_abs(xp, res.recompose() - mat), 1e-12)
            self.assertLess(max_abs(xp, res.q.T @ res.q - xp.eye(size)), 1e-12)

    def test_tridiagonal(self):
        for xp in backends:
            mat = rand_symmetric(xp, 6)
            res = SymmetricTridiagonal()(mat)
            tri = res.tridiagonal()
            full = res.q.T @ mat @ res.q
            self.assertLess(max_abs(xp, full - tri), 1e-12)
            for i in range(6):
                for j in range(6):
                    if abs(i - j) > 1:
                        self.assertEqual(float(tri[i, j]), 0.0)

    def test_lower_triangle(self):
        for xp in backends:
            mat = rand_symmetric(xp, 5)
            garbage = xp.asarray(mat, copy=True)
            for i in range(5):
                for j in range(i+1, 5):
                    garbage[i, j] = 100.0
            ref = SymmetricTridiagonal()(mat)
            res = SymmetricTridiagonal()(garbage)
            self.assertLess(max_abs(xp, ref.q - res.q), 1e-14)
            self.assertLess(max_abs(xp, ref.diag - res.diag), 1e-14)
            self.assertLess(max_abs(xp, ref.off_diag - res.off_diag), 1e-14)

    def test_already_tridiagonal(self):
        for xp in backends:
            mat = xp.asarray([[3.0, 0.0, 0.0],
                              [0.0, 1.0, 0.0],
                              [0.0, 0.0, 2.0]])
            q, diag, off_diag = SymmetricTridiagonal()(mat).unpack()
            self.assertEqual(max_abs(xp, q - xp.eye(3)), 0.0)
            self.assertEqual([float(v) for v in diag], [3.0, 1.0, 2.0])
            self.assertEqual([float(v) for v in off_diag], [0.0, 0.0])

    def test_integer_input(self):
        for xp in backends:
            mat = xp.asarray([[2, 1], [1, 2]])
            res = SymmetricTridiagonal()(mat)
            self.assertEqual(res.diag.dtype, xp.float64)

    def test_non_square(self):
        for xp in backends:
            self.assertRaises(ValueError, SymmetricTridiagonal(), xp.zeros((2, 3)))
            self.assertRaises(ValueError, SymmetricTridiagonal(), xp.zeros(3))

if __name__ == '__main__':
    unittest.main()
