"""
Implementations of the Model contract.
"""
import math
from typing import Any, List, Union

from minisgd.core import Model, Scalar
from minisgd.linear_algebra import Vector, dimension, dot


class Constant(Model):
    """
    Predicts the same value c regardless of the input. Useful to estimate a statistic (mean, median) of the targets.
    """

    def __init__(self, c: Scalar):
        self.c = c

    def predict(self, input: Any = None) -> Scalar:
        return self.c

    def num_coefficients(self) -> int:
        return 1

    def gradient(self, coefficient: int, input: Any = None) -> Scalar:
        self._check_index(coefficient)
        return 1.0

    def coefficient(self, index: int) -> Scalar:
        self._check_index(index)
        return self.c

    def set_coefficient(self, index: int, value: Scalar):
        self._check_index(index)
        self.c = value

    @staticmethod
    def _check_index(index: int):
        if index != 0:
            raise IndexError(f'Constant has a single coefficient, got index {index}')

    def __repr__(self):
        return f'Constant(c={self.c})'


class Linear(Model):
    """
    y = m * x + c, where m and x are either both scalars or both vectors of the same dimension.

    Coefficients are ordered slopes first, intercept c last.
    """

    m: Union[Scalar, List[Scalar]]
    c: Scalar

    def __init__(self, m: Vector, c: Scalar):
        self.m = m if dimension(m) is None else list(m)
        self.c = c

    def predict(self, input: Vector) -> Scalar:
        return dot(self.m, input) + self.c

    def num_coefficients(self) -> int:
        dim = dimension(self.m)
        return 2 if dim is None else dim + 1

    def gradient(self, coefficient: int, input: Vector) -> Scalar:
        if coefficient == self._intercept_index():
            return 1.0

        self._check_index(coefficient)
        if dimension(self.m) is None:
            return input

        if len(input) != len(self.m):
            raise ValueError(f'Expected size of the input dimension is {len(self.m)}, got {len(input)}')
        return input[coefficient]

    def coefficient(self, index: int) -> Scalar:
        if index == self._intercept_index():
            return self.c

        self._check_index(index)
        return self.m if dimension(self.m) is None else self.m[index]

    def set_coefficient(self, index: int, value: Scalar):
        if index == self._intercept_index():
            self.c = value
            return

        self._check_index(index)
        if dimension(self.m) is None:
            self.m = value
        else:
            self.m[index] = value

    def _intercept_index(self) -> int:
        return self.num_coefficients() - 1

    def _check_index(self, index: int):
        if not 0 <= index < self.num_coefficients():
            raise IndexError(f'Coefficient index {index} out of range, model has {self.num_coefficients()} coefficients')

    def __repr__(self):
        return f'Linear(m={self.m}, c={self.c})'


class Logistic(Model):
    """
    Logistic function applied to a linear model, y = 1 / (1 + e^(-(m * x + c))). Predicts a probability, which makes
    it suitable for binary classification.
    """

    def __init__(self, linear: Linear):
        self.linear = linear

    def predict(self, input: Vector) -> Scalar:
        z = self.linear.predict(input)
        # Only ever exponentiate non positive values, so math.exp can not overflow.
        if z >= 0:
            return 1.0 / (1.0 + math.exp(-z))
        e = math.exp(z)
        return e / (1.0 + e)

    def num_coefficients(self) -> int:
        return self.linear.num_coefficients()

    def gradient(self, coefficient: int, input: Vector) -> Scalar:
        p = self.predict(input)
        return p * (1.0 - p) * self.linear.gradient(coefficient, input)

    def coefficient(self, index: int) -> Scalar:
        return self.linear.coefficient(index)

    def set_coefficient(self, index: int, value: Scalar):
        self.linear.set_coefficient(index, value)

    def __repr__(self):
        return f'Logistic(linear={self.linear!r})'
