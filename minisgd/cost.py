"""
Implementations of the Cost contract. Every gradient is expressed via chain rule as the outer derivative of the cost by
the prediction times the derivative of the prediction by the coefficient.
"""
import math

from minisgd.core import Cost, Scalar


class LeastSquares(Cost):
    """
    (prediction - truth)^2, minimized by the mean of the truths.
    """

    def gradient(self, prediction: Scalar, truth: Scalar, gradient_error_by_coefficient: Scalar) -> Scalar:
        return 2.0 * (prediction - truth) * gradient_error_by_coefficient


class LeastAbsoluteDeviation(Cost):
    """
    |prediction - truth|, minimized by the median of the truths.
    """

    def gradient(self, prediction: Scalar, truth: Scalar, gradient_error_by_coefficient: Scalar) -> Scalar:
        error = prediction - truth
        if error > 0:
            return gradient_error_by_coefficient
        elif error < 0:
            return -gradient_error_by_coefficient
        # Also covers NaN errors, which do not compare to zero.
        return 0.0 if error == 0 else error


class MaxLikelihood(Cost):
    """
    Negative log-likelihood of a truth in {0, 1} given the predicted probability of it being 1. Meant to be used with
    models predicting probabilities, such as Logistic.
    """

    def gradient(self, prediction: Scalar, truth: Scalar, gradient_error_by_coefficient: Scalar) -> Scalar:
        numerator = prediction - truth
        denominator = prediction * (1.0 - prediction)
        if denominator == 0:
            # Saturated prediction. Yields what floating point division would, instead of raising.
            if numerator == 0 or math.isnan(numerator):
                outer = math.nan
            else:
                outer = math.copysign(math.inf, numerator)
            return outer * gradient_error_by_coefficient
        return numerator / denominator * gradient_error_by_coefficient
