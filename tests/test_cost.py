import math
import unittest

import numpy as np
import torch

from minisgd.cost import LeastSquares, LeastAbsoluteDeviation, MaxLikelihood


class TestCost(unittest.TestCase):

    def test_least_squares(self):
        cost = LeastSquares()
        self.assertEqual(4.0, cost.gradient(3.0, 1.0, 1.0))
        self.assertEqual(-12.0, cost.gradient(1.0, 4.0, 2.0))
        self.assertEqual(0.0, cost.gradient(2.5, 2.5, 7.0))

    def test_least_absolute_deviation(self):
        cost = LeastAbsoluteDeviation()
        self.assertEqual(2.0, cost.gradient(3.0, 1.0, 2.0))
        self.assertEqual(-2.0, cost.gradient(-3.0, 1.0, 2.0))
        self.assertEqual(0.0, cost.gradient(1.0, 1.0, 2.0))
        self.assertTrue(math.isnan(cost.gradient(math.nan, 1.0, 2.0)))

    def test_max_likelihood(self):
        cost = MaxLikelihood()
        # -ln(p) for truth 1, -ln(1 - p) for truth 0.
        np.testing.assert_almost_equal(cost.gradient(0.25, 1.0, 1.0), -4.0)
        np.testing.assert_almost_equal(cost.gradient(0.25, 0.0, 1.0), 1 / 0.75)

    def test_max_likelihood_saturated_prediction(self):
        cost = MaxLikelihood()
        self.assertEqual(math.inf, cost.gradient(1.0, 0.0, 2.0))
        self.assertEqual(-math.inf, cost.gradient(0.0, 1.0, 2.0))
        self.assertTrue(math.isnan(cost.gradient(1.0, 1.0, 2.0)))
        # Logistic gradients vanish when the prediction saturates.
        self.assertTrue(math.isnan(cost.gradient(1.0, 0.0, 0.0)))

    def test_gradients_match_autograd(self):
        """
        Every cost is differentiated by a coefficient w of the prediction p = w * x (so dp/dw = x), using both the chain
        rule gradient and PyTorch autograd.
        """
        cases = [
            (LeastSquares(), lambda p, t: (p - t) ** 2, [(1.5, 0.4, 2.0), (-3.0, 1.0, 0.5), (0.2, 0.2, 1.0)]),
            (LeastAbsoluteDeviation(), lambda p, t: (p - t).abs(), [(1.5, 0.4, 2.0), (-3.0, 1.0, 0.5)]),
            (
                MaxLikelihood(),
                lambda p, t: torch.nn.functional.binary_cross_entropy(p, t),
                [(0.5, 1.0, 0.3), (0.9, 0.0, 1.0), (0.1, 1.0, 0.25), (0.7, 0.0, 0.6)],
            ),
        ]

        for cost, torch_cost, values in cases:
            for w, truth, x in values:
                with self.subTest(cost=type(cost).__name__, w=w, truth=truth, x=x):
                    torch_w = torch.tensor(w, dtype=torch.float64, requires_grad=True)
                    torch_p = torch_w * x
                    torch_cost(torch_p, torch.tensor(truth, dtype=torch.float64)).backward()

                    np.testing.assert_almost_equal(cost.gradient(w * x, truth, x), torch_w.grad.item(), decimal=9)


if __name__ == '__main__':
    unittest.main()
