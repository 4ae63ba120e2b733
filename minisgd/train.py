"""
Teachers describe how the coefficients of a Model change based on a Cost function and a history of events.
"""
import logging
from abc import abstractmethod
from typing import Any, Iterable, List, MutableSequence, Tuple, TypeVar

from minisgd.core import Cost, Model, Scalar

logger = logging.getLogger(__name__)

M = TypeVar('M', bound=Model)

Event = Tuple[Any, Scalar]


class Teacher:

    @abstractmethod
    def teach_event(self, cost: Cost, model: Model, features: Any, truth: Scalar):
        """
        Changes the model's coefficients in place, so that they (hopefully) decrease the cost at
        (model.predict(features), truth).
        """
        pass


class GradientDescent(Teacher):
    """
    Plain stochastic gradient descent with a constant learning rate.
    """

    def __init__(self, learning_rate: Scalar):
        self._learning_rate = learning_rate

    @property
    def learning_rate(self) -> Scalar:
        return self._learning_rate

    def teach_event(self, cost: Cost, model: Model, features: Any, truth: Scalar):
        gradients = _cost_gradients(cost, model, features, truth)
        for ci, gradient in enumerate(gradients):
            model.set_coefficient(ci, model.coefficient(ci) - self._learning_rate * gradient)

    def __repr__(self):
        return f'GradientDescent(learning_rate={self._learning_rate})'


def _cost_gradients(cost: Cost, model: Model, features: Any, truth: Scalar) -> List[Scalar]:
    """
    :return: derivative of the cost by every coefficient, all evaluated at the current coefficients.
    """
    # A single prediction is shared by all coefficients. Every gradient is computed before any coefficient changes.
    prediction = model.predict(features)
    return [
        cost.gradient(prediction, truth, model.gradient(ci, features))
        for ci in range(model.num_coefficients())
    ]


def teach_history(teacher: Teacher, cost: Cost, model: Model, history: Iterable[Event]):
    """
    Teaches the model every (features, truth) event of the history, in order. To train over multiple passes, supply a
    history which repeats the data itself, e.g. itertools.islice(itertools.cycle(data), n).
    """
    logger.debug('Teaching history to %r using %r', model, teacher)

    num_events = 0
    for features, truth in history:
        teacher.teach_event(cost, model, features, truth)
        num_events += 1

    logger.debug('Taught %d events, model is now %r', num_events, model)


def inert_gradient_descent_step(
    cost: Cost,
    model: Model,
    features: Any,
    truth: Scalar,
    learning_rate: Scalar,
    inertia: Scalar,
    velocity: MutableSequence[Scalar],
):
    """
    Changes all coefficients of the model based on their derivative of the cost at features, accelerated by the
    velocity accumulated over the previous steps.

    Will not get stuck on saddle points as easily as a plain SGD and converges quicker in general. A good default for
    inertia is 0.9.

    :param velocity: owned by the caller and updated in place. Must have one entry per coefficient, all zero before the
                     first step of a training run.
    """
    inv_inertia = 1.0 - inertia
    gradients = _cost_gradients(cost, model, features, truth)

    for ci, gradient in enumerate(gradients):
        velocity[ci] = inertia * velocity[ci] - inv_inertia * learning_rate * gradient
        model.set_coefficient(ci, model.coefficient(ci) + velocity[ci])


def stochastic_gradient_descent(cost: Cost, start: M, history: Iterable[Event], learning_rate: Scalar) -> M:
    """
    Applies a plain SGD step with constant learning rate once for every event in the history.

    :return: trained copy of start. start itself is left unchanged.
    """
    teacher = GradientDescent(learning_rate)
    model = start.copy()
    teach_history(teacher, cost, model, history)
    return model


def inert_stochastic_gradient_descent(
    cost: Cost,
    start: M,
    history: Iterable[Event],
    learning_rate: Scalar,
    inertia: Scalar = 0.9,
) -> M:
    """
    SGD with constant learning rate and velocity, see inert_gradient_descent_step.

    :return: trained copy of start. start itself is left unchanged.
    """
    model = start.copy()
    velocity = [0.0] * model.num_coefficients()
    logger.debug('Inert SGD of %r, learning_rate=%s, inertia=%s', model, learning_rate, inertia)

    num_events = 0
    for features, truth in history:
        inert_gradient_descent_step(cost, model, features, truth, learning_rate, inertia, velocity)
        num_events += 1

    logger.debug('Trained %d events, model is now %r', num_events, model)
    return model
