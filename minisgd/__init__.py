"""
Minimalistic library for supervised regression training, allowing to write teachers independent of the trained model
and the minimized cost function.
"""
from minisgd.core import Cost, Model, Scalar
from minisgd.train import (
    GradientDescent,
    Teacher,
    inert_gradient_descent_step,
    inert_stochastic_gradient_descent,
    stochastic_gradient_descent,
    teach_history,
)

__all__ = [
    'Cost',
    'GradientDescent',
    'Model',
    'Scalar',
    'Teacher',
    'inert_gradient_descent_step',
    'inert_stochastic_gradient_descent',
    'stochastic_gradient_descent',
    'teach_history',
]
