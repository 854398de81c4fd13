import unittest

import numpy as np
from symeig import wilkinson_shift
from symeig.wilkinsonshift import symmetric_eigenvalues_2x2

class TestWilkinsonShift(unittest.TestCase):

    def check_shift(self, tmm: float, tnn: float, tmn: float) -> None:
        mat = np.array([[tmm, tmn], [tmn, tnn]])
        vals = np.linalg.eigvalsh(mat)
        computed = wilkinson_shift(tmm, tnn, tmn)
        scale = max(1.0, float(np.max(np.abs(vals))))
        # the shift is an eigenvalue with minimal distance to tnn
        self.assertLess(float(np.min(np.abs(vals - computed))), 1e-7 * scale)
        dist = float(np.min(np.abs(vals - tnn)))
        self.assertLess(abs(abs(computed - tnn) - dist), 1e-7 * scale)

    def test_random(self):
        np.random.seed(0)
        for _ in range(1000):
            a = np.random.rand(2, 2)
            mat = a @ a.T
            self.check_shift(mat[0, 0], mat[1, 1], mat[0, 1])

    def test_zero_off_diagonal_exact(self):
        np.random.seed(1)
        for tmm, tnn in np.random.randn(100, 2):
            self.assertEqual(wilkinson_shift(float(tmm), float(tnn), 0.0), float(tnn))
        self.assertEqual(wilkinson_shift(42.0, 64.0, 0.0), 64.0)

    def test_zero(self):
        self.assertEqual(wilkinson_shift(0.0, 0.0, 0.0), 0.0)

    def test_zero_diagonal(self):
        self.check_shift(0.0, 0.0, 42.0)
        self.assertAlmostEqual(abs(wilkinson_shift(0.0, 0.0, 42.0)), 42.0)

    def test_zero_trace(self):
        self.check_shift(42.0, -42.0, 20.0)

    def test_equal_diagonal(self):
        self.check_shift(42.0, 42.0, 0.0)
        self.check_shift(42.0, 42.0, 1.0)
        self.check_shift(42.0, 42.0, -1e-3)

    def test_zero_determinant(self):
        self.check_shift(2.0, 8.0, 4.0)

    def test_eigenvalues_2x2(self):
        np.random.seed(2)
        for a, b, c in np.random.randn(200, 3):
            l0, l1 = symmetric_eigenvalues_2x2(float(a), float(b), float(c))
            vals = np.linalg.eigvalsh(np.array([[a, b], [b, c]]))
            self.assertTrue(np.allclose(sorted([l0, l1]), vals, atol=1e-12))
            # l0 is the eigenvalue paired with the leading diagonal entry
            self.assertLessEqual(abs(l0 - a), abs(l1 - a) + 1e-12)

    def test_eigenvalues_2x2_diagonal(self):
        self.assertEqual(symmetric_eigenvalues_2x2(3.0, 0.0, 1.0), (3.0, 1.0))
        self.assertEqual(symmetric_eigenvalues_2x2(1.0, 0.0, 3.0), (1.0, 3.0))
        self.assertEqual(symmetric_eigenvalues_2x2(2.0, 0.0, 2.0), (2.0, 2.0))

if __name__ == '__main__':
    unittest.main()
