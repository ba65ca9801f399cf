"""
Neural network components for ffnet.

This module contains the core building blocks: the tensor algebra, the layer
interface, activations, losses and the network orchestrator.
"""

from .tensor import Tensor, Vector, Matrix
from .errors import ShapeError, PreconditionError, DomainError
from .module import Layer
from .losses import MeanSquaredError, BinaryCrossEntropy, LossFunction
from .activations import Activation
from .network import Network

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
    "Network"
]
