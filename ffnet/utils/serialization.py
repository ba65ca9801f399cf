"""
serialization.py
~~~~~~~~~~~~~~~~

JSON persistence for network weights.

The on-disk record is a list with one entry per layer, in network order::

    [{"weights": [[...], ...], "biases": [...]}, ...]
"""

import json
import logging
import os
from typing import Any, Dict, List

from .backend import xp
from ..nn.tensor import Tensor

logger = logging.getLogger(__name__)


class WeightsEncoder(json.JSONEncoder):
    """JSON encoder that handles tensors and numpy arrays."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, Tensor):
            return obj.tolist()
        if isinstance(obj, xp.ndarray):
            return obj.tolist()
        if isinstance(obj, xp.floating):
            return float(obj)
        return super().default(obj)


def validate_record(record: Any, source: str = "record") -> None:
    """
    Check that *record* is a list of ``{"weights", "biases"}`` entries.

    Raises:
        ValueError: If the record or one of its entries is malformed
    """
    if not isinstance(record, list):
        raise ValueError(f"Weights {source} must contain a list of layer entries")
    for index, entry in enumerate(record):
        if not isinstance(entry, dict) or "weights" not in entry or "biases" not in entry:
            raise ValueError(f"Entry {index} in {source} must have 'weights' and 'biases' keys")


def write_record(record: List[Dict[str, Any]], path: str) -> None:
    """
    Write a weight record to *path* as JSON.

    Args:
        record: One ``{"weights", "biases"}`` entry per layer
        path: Destination file; parent directories are created
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(record, f, cls=WeightsEncoder)
    logger.debug("Wrote weights for %d layers to %s", len(record), path)


def read_record(path: str) -> List[Dict[str, Any]]:
    """
    Read a weight record written by :func:`write_record`.

    Raises:
        ValueError: If the file does not hold a list of weight entries
    """
    with open(path, "r", encoding="utf-8") as f:
        record = json.load(f)

    validate_record(record, source=path)

    logger.debug("Read weights for %d layers from %s", len(record), path)
    return record
