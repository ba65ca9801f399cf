"""
Utility functions and helpers for ffnet.

This module contains the numeric backend, random-source helpers and logging.
Weight persistence lives in ``ffnet.utils.serialization``.
"""

from .backend import xp, default_rng, set_seed
from .logger import setup_logger, train_logger

__all__ = [
    "xp",
    "default_rng",
    "set_seed",
    "setup_logger",
    "train_logger"
]
