from collections import namedtuple

from ..utils.backend import xp, DTYPE
from .errors import ShapeError, DomainError

LossFunction = namedtuple("LossFunction", ["func", "derivative", "name"], defaults=(None,))


def _as_arrays(y_true, y_pred):
    # Losses work on plain numeric sequences; Vectors are unwrapped by the caller
    y_true = xp.asarray(y_true, dtype=DTYPE)
    y_pred = xp.asarray(y_pred, dtype=DTYPE)
    if y_true.ndim != 1 or y_pred.ndim != 1:
        raise ShapeError(f"Loss functions expect flat sequences, got shapes {y_true.shape} and {y_pred.shape}")
    if y_true.shape != y_pred.shape:
        raise ShapeError(f"y_true and y_pred must have the same length, got {len(y_true)} and {len(y_pred)}")
    if y_true.size == 0:
        raise ValueError("Loss functions require at least one element")
    return y_true, y_pred


def _check_probabilities(y_pred):
    if xp.any((y_pred <= 0.0) | (y_pred >= 1.0)):
        raise DomainError("Binary cross-entropy is undefined for predictions outside the open interval (0, 1)")


def mse(y_true, y_pred):
    y_true, y_pred = _as_arrays(y_true, y_pred)
    return float(xp.sum((y_true - y_pred) ** 2) / y_true.size)


def mse_prime(y_true, y_pred):
    y_true, y_pred = _as_arrays(y_true, y_pred)
    return 2 * (y_pred - y_true) / y_true.size


def binary_cross_entropy(y_true, y_pred):
    y_true, y_pred = _as_arrays(y_true, y_pred)
    _check_probabilities(y_pred)
    terms = -y_true * xp.log(y_pred) - (1 - y_true) * xp.log(1 - y_pred)
    return float(xp.sum(terms) / y_true.size)


def binary_cross_entropy_prime(y_true, y_pred):
    y_true, y_pred = _as_arrays(y_true, y_pred)
    _check_probabilities(y_pred)
    return ((1 - y_true) / (1 - y_pred) - y_true / y_pred) / y_true.size


def finite_difference(func, h=1e-5):
    """Build a forward-difference gradient of *func* with respect to y_pred.

    Meant for gradient checks against the analytic derivatives above.
    """
    def derivative(y_true, y_pred):
        y_pred = xp.asarray(y_pred, dtype=DTYPE)
        base = func(y_true, y_pred)
        grad = xp.empty_like(y_pred)
        for i in range(y_pred.size):
            shifted = y_pred.copy()
            shifted[i] += h
            grad[i] = (func(y_true, shifted) - base) / h
        return grad
    return derivative


MeanSquaredError = LossFunction(mse, mse_prime, "mse")
BinaryCrossEntropy = LossFunction(binary_cross_entropy, binary_cross_entropy_prime, "binary_cross_entropy")
