from __future__ import annotations

import copy
from abc import abstractmethod
from typing import Any

Scalar = float


class Model:
    """
    Defines how a target is predicted from an input. The prediction depends on a fixed number of coefficients whose
    values are derived by a training algorithm.
    """

    @abstractmethod
    def predict(self, input: Any) -> Scalar:
        """
        :return: prediction for the input based on the current coefficients.
        """
        pass

    @abstractmethod
    def num_coefficients(self) -> int:
        """
        :return: number of coefficients the model depends on. Constant for the lifetime of the model.
        """
        pass

    @abstractmethod
    def gradient(self, coefficient: int, input: Any) -> Scalar:
        """
        :return: derivative of predict(input) by the n-th coefficient, evaluated at the current coefficients.
        """
        pass

    @abstractmethod
    def coefficient(self, index: int) -> Scalar:
        pass

    @abstractmethod
    def set_coefficient(self, index: int, value: Scalar):
        pass

    def copy(self) -> Model:
        """
        :return: independent duplicate of the model, sharing no mutable state with it.
        """
        return copy.deepcopy(self)


class Cost:
    """
    Cost function whose value is supposed to be minimized by the training algorithm.
    """

    @abstractmethod
    def gradient(self, prediction: Scalar, truth: Scalar, gradient_error_by_coefficient: Scalar) -> Scalar:
        """
        Derivative of the cost by a single coefficient, obtained using chain rule.

        :param gradient_error_by_coefficient: derivative of the prediction by the coefficient, see Model.gradient.
        """
        pass
