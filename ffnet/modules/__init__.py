"""
Layer variants for ffnet.

The set of layer variants is closed: every concrete layer is listed in
``LAYER_TYPES`` under its ``layer_type`` key.
"""

from .dense import Dense

LAYER_TYPES = {
    Dense.layer_type: Dense,
}

__all__ = [
    "Dense",
    "LAYER_TYPES",
]
