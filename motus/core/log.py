"""
Motus structured logging.

Library modules log through get_logger(); nothing is emitted until the
application calls setup_logging(). CLI output (cli.py) uses print() for the
password itself, which is never passed to a logger.
"""

import logging
import sys

LOG_FORMAT = '%(asctime)s [%(name)s] %(levelname)s: %(message)s'


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under 'motus'."""
    return logging.getLogger(f'motus.{name}')


def setup_logging(level=logging.INFO, log_file=None):
    """
    Configure the motus root logger.

    Calling it again replaces the handlers installed by a previous call, so
    repeated in-process CLI runs do not duplicate log lines.

    Args:
        level: Logging level (default INFO)
        log_file: Optional file path for file logging
    """
    logger = logging.getLogger('motus')
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, '_motus', False):
            logger.removeHandler(handler)
            handler.close()

    fmt = logging.Formatter(LOG_FORMAT)

    handler = logging.StreamHandler(sys.stderr)
    handlers = [handler]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for h in handlers:
        h.setFormatter(fmt)
        h._motus = True
        logger.addHandler(h)
