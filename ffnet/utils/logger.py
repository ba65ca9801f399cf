import logging
from pathlib import Path

from ..config import DefaultConfig


def setup_logger(name, log_file=None, level=None):
    """Setup a logger that writes to the console and, optionally, to *log_file*.

    A relative *log_file* is placed under ``DefaultConfig.log_dir``, which is
    created on demand.
    """
    level = DefaultConfig.log_level if level is None else level
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid adding multiple handlers in interactive / multi-import environments
    if not logger.handlers:
        formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')

        # Console handler
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(formatter)
        logger.addHandler(ch)

        # File handler
        if log_file is not None:
            log_file = Path(log_file)
            if not log_file.is_absolute():
                log_file = Path(DefaultConfig.log_dir) / log_file
            log_file.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(log_file)
            fh.setLevel(level)
            fh.setFormatter(formatter)
            logger.addHandler(fh)

    return logger


# Default training logger that other modules can import
train_logger = setup_logger('ffnet.train')
