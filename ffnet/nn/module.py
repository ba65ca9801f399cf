from ..config import DefaultConfig
from ..utils.backend import default_rng


class Layer:
    """Capability interface shared by every layer variant.

    A layer owns its parameters exclusively and only mutates them inside its
    own ``backward``. Concrete variants are listed in ``ffnet.modules.LAYER_TYPES``.
    """

    layer_type = None

    def __init__(self, rng=None, init_range=None):
        self.rng = rng if rng is not None else default_rng()
        self.init_range = tuple(init_range) if init_range is not None else DefaultConfig.init_range
        if self.init_range[0] >= self.init_range[1]:
            raise ValueError(f"init_range must be an increasing (low, high) pair, got {self.init_range}")

    def __str__(self):
        lines = [f"{type(self).__name__} ({self.layer_type}):"]
        for name, param in self.parameters().items():
            lines.append(f"  {name}: shape={tuple(param.shape)}, dtype={param.dtype}")
        return "\n".join(lines)

    def __call__(self, x):
        return self.forward(x)

    @property
    def num_parameters(self):
        return sum(p.size for p in self.parameters().values())

    def uniform(self, shape):
        low, high = self.init_range
        return self.rng.uniform(low, high, size=shape)

    def parameters(self):
        return {}

    def forward(self, x):
        raise NotImplementedError(f"{type(self).__name__} must implement forward()")

    def backward(self, output_gradient, learning_rate):
        raise NotImplementedError(f"{type(self).__name__} must implement backward()")
