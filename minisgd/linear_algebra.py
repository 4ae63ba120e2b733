"""
Helpers treating a slope either as a scalar or as a vector of scalars.
"""
import numbers
from typing import Optional, Sequence, Union

from minisgd.core import Scalar

Vector = Union[Scalar, Sequence[Scalar]]


def dimension(v: Vector) -> Optional[int]:
    """
    :return: None for a scalar, number of entries otherwise.
    """
    if isinstance(v, numbers.Real):
        return None
    return len(v)


def dot(m: Vector, x: Vector) -> Scalar:
    if dimension(m) is None:
        return m * x

    if len(x) != len(m):
        raise ValueError(f'Expected vector of dimension {len(m)}, got {len(x)}')

    return sum((m_i * x_i for m_i, x_i in zip(m, x)), 0.0)
