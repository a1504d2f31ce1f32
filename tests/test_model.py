"""
Unit tests for the GP regression model.
"""

import unittest
from concurrent.futures import ThreadPoolExecutor

import numpy as np

import gpexplorer.num as gnp
from gpexplorer.core import (
    EPS,
    ConfigurationError,
    DimensionMismatch,
    GaussianProcess,
    GPExplorerError,
    NotInvertible,
)
from gpexplorer.kernel import CovarianceFunction, Matern32Kernel, RbfKernel


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------
class ConstantKernel(CovarianceFunction):
    def __init__(self, c):
        self.c = c

    def compute(self, a, b):
        return self.c


def reference_posterior(x, y, xq, sigma, length_scale, noise_sigma):
    """Textbook GP posterior with numpy, mean = K(xq, x) (K + s I)^-1 y."""
    x, y, xq = np.asarray(x), np.asarray(y), np.asarray(xq)

    def k(a, b):
        return sigma * np.exp(-0.5 * (a[:, None] - b[None, :]) ** 2 / length_scale**2)

    K = k(x, x) + (noise_sigma + EPS) * np.eye(len(x))
    Kqx = k(xq, x)
    mean = Kqx @ np.linalg.solve(K, y)
    cov = k(xq, xq) - Kqx @ np.linalg.solve(K, Kqx.T)
    return mean, np.diag(cov) + EPS


# ======================================================================
#                           Test cases
# ======================================================================
class TestConstruction(unittest.TestCase):
    def test_stores_owned_copies(self):
        x = [1.0, 2.0]
        y = [3.0, 4.0]
        gp = GaussianProcess(x, y, RbfKernel(1.0, 1.0), 0.1)
        x.append(5.0)
        y[0] = -1.0
        self.assertTrue(np.array_equal(gnp.to_np(gp.x), [1.0, 2.0]))
        self.assertTrue(np.array_equal(gnp.to_np(gp.y), [3.0, 4.0]))
        self.assertEqual(gp.n, 2)
        self.assertEqual(gp.noise_sigma, 0.1)

    def test_inverse_is_inverse_of_regularized_covariance(self):
        x = [1.0, 2.0, 6.0]
        kernel = RbfKernel(1.0, 1.0)
        gp = GaussianProcess(x, [1.0, 1.0, -1.0], kernel, 0.1)
        K = gnp.to_np(kernel.compute_matrix(x, x)) + (0.1 + EPS) * np.eye(3)
        Kinv = gnp.to_np(gp.inverse_covariance)
        self.assertTrue(np.allclose(K @ Kinv, np.eye(3), atol=1e-10))

    def test_dimension_mismatch(self):
        with self.assertRaises(DimensionMismatch):
            GaussianProcess([1.0, 2.0], [1.0, 2.0, 3.0], RbfKernel(1.0, 1.0), 0.1)

    def test_not_one_dimensional(self):
        with self.assertRaises(DimensionMismatch):
            GaussianProcess([[1.0, 2.0], [3.0, 4.0]], [1.0, 2.0], RbfKernel(), 0.1)

    def test_column_inputs_are_accepted(self):
        gp = GaussianProcess(np.array([[1.0], [2.0]]), np.array([[3.0], [4.0]]), RbfKernel(), 0.0)
        self.assertEqual(gp.n, 2)

    def test_non_finite_data(self):
        with self.assertRaises(GPExplorerError):
            GaussianProcess([1.0, float("nan")], [1.0, 2.0], RbfKernel(), 0.1)

    def test_zero_length_scale(self):
        with self.assertRaises(ConfigurationError):
            GaussianProcess.from_hyperparameters(
                [1.0, 2.0], [1.0, 2.0], sigma=1.0, length_scale=0.0, noise_sigma=0.1
            )

    def test_negative_noise(self):
        with self.assertRaises(ConfigurationError):
            GaussianProcess([1.0], [1.0], RbfKernel(), -0.5)

    def test_configuration_checked_before_shapes(self):
        with self.assertRaises(ConfigurationError):
            GaussianProcess([1.0, 2.0], [1.0], RbfKernel(), -1.0)

    def test_not_a_kernel(self):
        with self.assertRaises(TypeError):
            GaussianProcess([1.0], [1.0], lambda a, b: 1.0, 0.1)

    def test_not_invertible(self):
        # K + (0 + EPS) I == [[0]]
        with self.assertRaises(NotInvertible):
            GaussianProcess([1.0], [1.0], ConstantKernel(-EPS), 0.0)

    def test_not_invertible_is_recoverable_error(self):
        try:
            GaussianProcess([1.0], [1.0], ConstantKernel(-EPS), 0.0)
        except GPExplorerError as exc:
            self.assertIsInstance(exc, ValueError)
        # a larger noise makes the same data usable
        gp = GaussianProcess([1.0], [1.0], ConstantKernel(-EPS), 1.0)
        self.assertEqual(gp.n, 1)

    def test_duplicated_points_without_noise(self):
        gp = GaussianProcess([1.0, 1.0, 1.0], [0.0, 1.0, 2.0], RbfKernel(1.0, 1.0), 0.0)
        mean, variance = gp.predict([1.0])
        self.assertAlmostEqual(gnp.to_scalar(mean[0]), 1.0, places=4)
        self.assertLess(gnp.to_scalar(variance[0]), 1e-3)

    def test_from_hyperparameters(self):
        gp = GaussianProcess.from_hyperparameters(
            [0.0], [1.0], sigma=2.0, length_scale=0.5, noise_sigma=0.2,
            kernel_class=Matern32Kernel,
        )
        self.assertEqual(gp.kernel, Matern32Kernel(2.0, 0.5))
        self.assertEqual(gp.noise_sigma, 0.2)

    def test_str(self):
        gp = GaussianProcess([0.0], [1.0], RbfKernel(1.0, 1.0), 0.1)
        self.assertIn("Training points: 1", str(gp))
        self.assertIn("RbfKernel", str(gp))


class TestPrediction(unittest.TestCase):
    def setUp(self):
        self.x = [1.0, 2.0, 6.0]
        self.y = [1.0, 1.0, -1.0]
        self.gp = GaussianProcess(self.x, self.y, RbfKernel(sigma=1.0, length_scale=1.0), 0.1)

    def test_single_point_round_trip(self):
        gp = GaussianProcess([0.3], [0.5], RbfKernel(sigma=1.0, length_scale=1.0), 0.0)
        mean, variance = gp.predict([0.3])
        self.assertLessEqual(abs(gnp.to_scalar(mean[0]) - 0.5), 1e-6)
        self.assertLessEqual(abs(gnp.to_scalar(variance[0])), 1e-3)

    def test_interpolation_without_noise(self):
        x = [0.0, 0.7, 1.9, 3.0]
        y = [0.2, -0.4, 0.9, 0.1]
        gp = GaussianProcess(x, y, RbfKernel(sigma=1.0, length_scale=1.0), 0.0)
        mean, variance = gp.predict(x)
        self.assertTrue(np.allclose(gnp.to_np(mean), y, atol=1e-4))
        self.assertTrue(np.all(gnp.to_np(variance) < 1e-3))

    def test_reference_scenario(self):
        mean, variance = self.gp.predict(self.x)
        mean, variance = gnp.to_np(mean), gnp.to_np(variance)
        self.assertEqual(mean.shape, (3,))
        self.assertEqual(variance.shape, (3,))
        self.assertTrue(np.all(np.abs(mean - np.array(self.y)) < 0.2))
        self.assertTrue(np.all(variance > 0.0))
        self.assertTrue(np.all(variance < 1.0))

    def test_matches_textbook_posterior(self):
        xq = np.linspace(-1.0, 8.0, 37)
        mean, variance = self.gp.predict(xq)
        ref_mean, ref_variance = reference_posterior(self.x, self.y, xq, 1.0, 1.0, 0.1)
        self.assertTrue(np.allclose(gnp.to_np(mean), ref_mean, atol=1e-10))
        self.assertTrue(np.allclose(gnp.to_np(variance), ref_variance, atol=1e-10))

    def test_output_order_follows_query_order(self):
        xq = [6.0, 1.0, 2.0]
        mean, _ = self.gp.predict(xq)
        mean_sorted, _ = self.gp.predict([1.0, 2.0, 6.0])
        self.assertTrue(np.allclose(gnp.to_np(mean), gnp.to_np(mean_sorted)[[2, 0, 1]]))

    def test_far_from_data_prior_variance(self):
        _, variance = self.gp.predict([1e3])
        self.assertAlmostEqual(gnp.to_scalar(variance[0]), 1.0 + EPS, places=12)
        _, variance = self.gp.predict([1e3], include_noise=True)
        self.assertAlmostEqual(gnp.to_scalar(variance[0]), 1.0 + 0.1 + EPS, places=12)

    def test_far_from_data_prior_mean(self):
        mean, _ = self.gp.predict([-1e3, 1e3])
        self.assertTrue(np.allclose(gnp.to_np(mean), 0.0))

    def test_variance_is_never_negative(self):
        gp = GaussianProcess(
            np.linspace(0.0, 1.0, 30), np.sin(np.linspace(0.0, 1.0, 30)),
            RbfKernel(sigma=1.0, length_scale=2.0), 0.0,
        )
        _, variance = gp.predict(np.linspace(0.0, 1.0, 101))
        self.assertTrue(np.all(gnp.to_np(variance) >= 0.0))

    def test_idempotent(self):
        xq = np.linspace(0.0, 10.0, 101)
        Kinv_before = gnp.to_np(self.gp.inverse_covariance).copy()
        mean1, variance1 = self.gp.predict(xq)
        mean2, variance2 = self.gp.predict(xq)
        self.assertTrue(np.array_equal(gnp.to_np(mean1), gnp.to_np(mean2)))
        self.assertTrue(np.array_equal(gnp.to_np(variance1), gnp.to_np(variance2)))
        self.assertTrue(np.array_equal(gnp.to_np(self.gp.inverse_covariance), Kinv_before))

    def test_concurrent_predictions(self):
        queries = [np.linspace(0.0, 10.0, 51) + 0.1 * i for i in range(16)]
        expected = [self.gp.predict(xq) for xq in queries]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(self.gp.predict, queries))
        for (m1, v1), (m2, v2) in zip(expected, results):
            self.assertTrue(np.allclose(gnp.to_np(m1), gnp.to_np(m2), rtol=0.0, atol=1e-12))
            self.assertTrue(np.allclose(gnp.to_np(v1), gnp.to_np(v2), rtol=0.0, atol=1e-12))

    def test_full_covariance(self):
        xq = [0.0, 1.5, 3.0, 7.0]
        _, variance = self.gp.predict(xq)
        _, cov = self.gp.predict(xq, return_type=1)
        cov = gnp.to_np(cov)
        self.assertEqual(cov.shape, (4, 4))
        self.assertTrue(np.allclose(cov, cov.T, atol=1e-12))
        self.assertTrue(np.allclose(np.diag(cov), gnp.to_np(variance), atol=1e-12))

    def test_full_covariance_with_noise(self):
        xq = [0.0, 3.0]
        _, cov = self.gp.predict(xq, return_type=1)
        _, cov_noisy = self.gp.predict(xq, return_type=1, include_noise=True)
        diff = gnp.to_np(cov_noisy) - gnp.to_np(cov)
        self.assertTrue(np.allclose(diff, 0.1 * np.eye(2)))

    def test_mean_only(self):
        mean, variance = self.gp.predict([1.0, 2.0], return_type=-1)
        self.assertIsNone(variance)
        self.assertEqual(tuple(mean.shape), (2,))

    def test_invalid_return_type(self):
        with self.assertRaises(ValueError):
            self.gp.predict([1.0], return_type=2)

    def test_empty_query(self):
        mean, variance = self.gp.predict([])
        self.assertEqual(tuple(mean.shape), (0,))
        self.assertEqual(tuple(variance.shape), (0,))

    def test_scalar_query(self):
        mean, variance = self.gp.predict(1.0)
        self.assertEqual(tuple(mean.shape), (1,))

    def test_empty_training_set_gives_prior(self):
        gp = GaussianProcess([], [], RbfKernel(sigma=2.0, length_scale=1.0), 0.1)
        mean, variance = gp.predict([0.0, 5.0])
        self.assertTrue(np.allclose(gnp.to_np(mean), 0.0))
        self.assertTrue(np.allclose(gnp.to_np(variance), 2.0 + EPS))

    def test_custom_kernel_without_diagonal(self):
        class Bare:
            def compute(self, a, b):
                return float(np.exp(-0.5 * (a - b) ** 2))

            def compute_matrix(self, xs, ys):
                return gnp.asarray([[self.compute(a, b) for b in ys] for a in xs])

        x = [1.0, 2.0, 6.0]
        gp = GaussianProcess(x, [1.0, 1.0, -1.0], Bare(), 0.1)
        mean, variance = gp.predict([1.0, 4.0])
        mean_ref, variance_ref = self.gp.predict([1.0, 4.0])
        self.assertTrue(np.allclose(gnp.to_np(mean), gnp.to_np(mean_ref)))
        self.assertTrue(np.allclose(gnp.to_np(variance), gnp.to_np(variance_ref)))


if __name__ == "__main__":
    unittest.main()
