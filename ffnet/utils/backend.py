import numpy as xp

from ..config import DefaultConfig

DTYPE = xp.float64

_rng = xp.random.default_rng(DefaultConfig.seed)


def default_rng(seed=None):
    """Return the shared generator, or a fresh one when *seed* is given."""
    if seed is None:
        return _rng
    return xp.random.default_rng(seed)


def set_seed(seed):
    global _rng
    _rng = xp.random.default_rng(seed)
