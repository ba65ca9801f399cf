from numbers import Real

from ..nn.errors import ShapeError, PreconditionError
from ..nn.module import Layer
from ..nn.tensor import Matrix, Vector, matrix_vector_multiply, outer, transpose
from ..utils.backend import xp


class Dense(Layer):
    """Fully-connected affine layer: ``output = weights @ input + bias``.

    ``weights`` has shape ``(output_size, input_size)`` and ``bias`` has
    length ``output_size``. ``backward`` applies the SGD update immediately.
    """

    layer_type = "dense"

    def __init__(self, input_size, output_size, rng=None, init_range=None):
        super().__init__(rng=rng, init_range=init_range)
        if input_size <= 0 or output_size <= 0:
            raise ValueError(f"Layer sizes must be positive, got ({input_size}, {output_size})")
        self.input_size = input_size
        self.output_size = output_size

        self.weights = Matrix(self.uniform((output_size, input_size)))
        self.bias = Vector(self.uniform(output_size))
        self.input = None

    @property
    def shape(self):
        return self.weights.shape

    def parameters(self):
        return {"weights": self.weights, "bias": self.bias}

    def forward(self, x):
        if not isinstance(x, Vector):
            raise TypeError(f"Input must be a Vector, got {type(x).__name__}")
        if len(x) != self.input_size:
            raise ShapeError(f"Expected input of length {self.input_size}, got {len(x)}")
        self.input = x
        return matrix_vector_multiply(self.weights, x) + self.bias

    def backward(self, output_gradient, learning_rate):
        if self.input is None:
            raise PreconditionError("backward() called without a matching forward()")
        if not isinstance(output_gradient, Vector):
            raise TypeError(f"Argument must be an instance of Vector, got {type(output_gradient).__name__}")
        if len(output_gradient) != self.output_size:
            raise ShapeError(f"Expected gradient of length {self.output_size}, got {len(output_gradient)}")
        if not isinstance(learning_rate, Real) or isinstance(learning_rate, bool):
            raise TypeError(f"learning_rate must be a real number, got {type(learning_rate).__name__}")
        if learning_rate <= 0:
            raise ValueError(f"learning_rate must be positive, got {learning_rate}")

        weights_gradient = outer(output_gradient, self.input)
        input_gradient = matrix_vector_multiply(transpose(self.weights), output_gradient)

        xp.subtract(self.weights.data, learning_rate * weights_gradient.data, out=self.weights.data)
        xp.subtract(self.bias.data, learning_rate * output_gradient.data, out=self.bias.data)

        self.input = None
        return input_gradient

    def get_params(self):
        return {"weights": self.weights.tolist(), "biases": self.bias.tolist()}

    def set_params(self, weights, biases):
        weights = weights if isinstance(weights, Matrix) else Matrix(weights)
        biases = biases if isinstance(biases, Vector) else Vector(biases)
        if weights.shape != self.weights.shape:
            raise ShapeError(f"Expected weights of shape {self.weights.shape}, got {weights.shape}")
        if biases.shape != self.bias.shape:
            raise ShapeError(f"Expected biases of shape {self.bias.shape}, got {biases.shape}")
        # copy so no other owner aliases this layer's buffers
        self.weights = weights.copy()
        self.bias = biases.copy()
