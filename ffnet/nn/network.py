import logging

from ..config import DefaultConfig
from ..utils.logger import train_logger
from ..utils.serialization import read_record, validate_record, write_record
from .errors import PreconditionError, ShapeError
from .losses import MeanSquaredError
from .module import Layer
from .tensor import Matrix, Vector, elementwise_multiply, map_elements

logger = logging.getLogger(__name__)


def _as_vector(sample):
    return sample if isinstance(sample, Vector) else Vector(sample)


def _as_samples(data):
    if isinstance(data, Matrix):
        return data.rows
    if isinstance(data, Vector):
        raise TypeError("Expected a collection of samples, got a single Vector")
    return [_as_vector(sample) for sample in data]


class Network:
    """Ordered stack of layers trained with per-sample SGD.

    ``activations[i]`` is applied after ``layers[i]``; layers past the end of
    ``activations`` are linear. Forward caches each layer's pre-activation
    output for the next backward, so one instance must not be driven from
    several threads at once.
    """

    def __init__(self, layers, activations=(), loss=MeanSquaredError):
        self.layers = list(layers)
        self.activations = list(activations)
        self.loss = loss

        for layer in self.layers:
            if not isinstance(layer, Layer):
                raise TypeError(f"Layers must be Layer instances, got {type(layer).__name__}")
        if len(self.activations) > len(self.layers):
            raise ValueError(f"Got {len(self.activations)} activations for {len(self.layers)} layers")

        self.layer_outputs = []

    def __str__(self):
        lines = ["Network:"]
        for i, layer in enumerate(self.layers):
            activation = (getattr(self.activations[i], "name", None) or "custom") if i < len(self.activations) else "linear"
            lines.append(f"  [{i}] {type(layer).__name__} {tuple(layer.shape)} -> {activation}")
        lines.append(f"  loss: {getattr(self.loss, 'name', None) or 'custom'}")
        return "\n".join(lines)

    @property
    def num_parameters(self):
        return sum(layer.num_parameters for layer in self.layers)

    def forward(self, x):
        current = x
        self.layer_outputs = [x]
        for i, layer in enumerate(self.layers):
            z = layer.forward(current)
            self.layer_outputs.append(z)
            if i < len(self.activations):
                current = map_elements(z, self.activations[i].func)
            else:
                current = z
        return current

    def backward(self, target, output, learning_rate):
        if len(self.layer_outputs) != len(self.layers) + 1:
            raise PreconditionError("backward() called without a matching forward()")
        gradient = Vector(self.loss.derivative(list(target), list(output)))
        for i in reversed(range(len(self.layers))):
            if i < len(self.activations):
                # chain rule through the pre-activation value
                local = map_elements(self.layer_outputs[i + 1], self.activations[i].derivative)
                gradient = elementwise_multiply(gradient, local)
            gradient = self.layers[i].backward(gradient, learning_rate)
        self.layer_outputs = []
        return gradient

    def train(self, inputs, targets, learning_rate=None, epochs=None, log_interval=None):
        """Run ``epochs`` passes of per-sample SGD over the samples in order.

        Returns the accumulated loss of each epoch.
        """
        learning_rate = DefaultConfig.learning_rate if learning_rate is None else learning_rate
        epochs = DefaultConfig.epochs if epochs is None else epochs
        log_interval = DefaultConfig.log_interval if log_interval is None else log_interval

        samples = _as_samples(inputs)
        labels = _as_samples(targets)
        if len(samples) != len(labels):
            raise ShapeError(f"Got {len(samples)} samples but {len(labels)} targets")

        history = []
        for epoch in range(epochs):
            epoch_error = 0.0
            for sample, target in zip(samples, labels):
                output = self.forward(sample)
                epoch_error += self.loss.func(list(target), list(output))
                self.backward(target, output, learning_rate)
            history.append(epoch_error)

            if log_interval and epoch % log_interval == 0:
                train_logger.info(f"Epoch {epoch}, Error: {epoch_error}")
        return history

    def predict(self, x):
        return self.forward(x)

    def evaluate(self, inputs, targets):
        samples = _as_samples(inputs)
        labels = _as_samples(targets)
        if len(samples) != len(labels):
            raise ShapeError(f"Got {len(samples)} samples but {len(labels)} targets")
        if not samples:
            raise ValueError("Cannot evaluate on an empty dataset")
        total = 0.0
        for sample, target in zip(samples, labels):
            total += self.loss.func(list(target), list(self.forward(sample)))
        return total / len(samples)

    # PERSISTENCE -----------------------------------------------------
    def get_weights(self):
        return [layer.get_params() for layer in self.layers]

    def set_weights(self, record):
        validate_record(record)
        if len(record) != len(self.layers):
            raise ShapeError(f"Record holds {len(record)} layers, network has {len(self.layers)}")

        # validate every entry before touching any layer
        entries = []
        for i, (layer, entry) in enumerate(zip(self.layers, record)):
            weights, biases = Matrix(entry["weights"]), Vector(entry["biases"])
            if weights.shape != layer.weights.shape or biases.shape != layer.bias.shape:
                raise ShapeError(f"Layer {i} expects weights {layer.weights.shape} and biases {layer.bias.shape}, "
                                 f"got {weights.shape} and {biases.shape}")
            entries.append((weights, biases))

        for layer, (weights, biases) in zip(self.layers, entries):
            layer.set_params(weights, biases)

    def save_weights(self, path):
        write_record(self.get_weights(), path)
        logger.info("Weights saved to %s", path)

    def load_weights(self, path):
        self.set_weights(read_record(path))
        logger.info("Weights loaded from %s", path)
