"""Default configuration shared by layers, networks and the logger."""

import logging


class DefaultConfig:
    """Defaults used when the caller does not pass an explicit value."""

    # Training
    learning_rate = 0.1
    epochs = 10000
    log_interval = 1000     # Epochs between progress reports

    # Initialisation
    init_range = (-1.0, 1.0)  # Uniform range for weights and biases
    seed = None               # None: fresh entropy on every run

    # Logging
    log_level = logging.INFO
    log_dir = "logs"
