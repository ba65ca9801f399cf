"""
ffnet - Feed-Forward NETworks

A small neural network toolkit with a strictly shape-checked tensor algebra,
dense layers, loss functions and a per-sample SGD training loop.
"""

__version__ = "0.1.0"
__author__ = "ffnet Team"

# Import main components for easy access
from .nn.tensor import Tensor, Vector, Matrix
from .nn.errors import ShapeError, PreconditionError, DomainError
from .nn.module import Layer
from .nn.losses import MeanSquaredError, BinaryCrossEntropy, LossFunction
from .nn.activations import Activation, sigmoid, tanh, relu, identity
from .nn.network import Network
from .modules.dense import Dense
from .config import DefaultConfig
from .utils.backend import xp

__all__ = [
    "Tensor",
    "Vector",
    "Matrix",
    "ShapeError",
    "PreconditionError",
    "DomainError",
    "Layer",
    "MeanSquaredError",
    "BinaryCrossEntropy",
    "LossFunction",
    "Activation",
    "sigmoid",
    "tanh",
    "relu",
    "identity",
    "Network",
    "Dense",
    "DefaultConfig",
    "xp"
]
