from collections import namedtuple

from ..utils.backend import xp

# Scalar function and its scalar derivative, applied element-wise
Activation = namedtuple("Activation", ["func", "derivative", "name"], defaults=(None,))


def _sigmoid(x):
    return 1.0 / (1.0 + xp.exp(-x))


def _sigmoid_prime(x):
    s = _sigmoid(x)
    return s * (1 - s)


def _tanh_prime(x):
    return 1.0 - xp.tanh(x) ** 2


sigmoid = Activation(_sigmoid, _sigmoid_prime, "sigmoid")
tanh = Activation(xp.tanh, _tanh_prime, "tanh")
relu = Activation(lambda x: x if x > 0 else 0.0, lambda x: 1.0 if x > 0 else 0.0, "relu")
identity = Activation(lambda x: x, lambda x: 1.0, "identity")
