"""Console logging for the editor and the render script."""
import logging
import sys


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Send records of the 'nonogram' logger tree to stdout."""
    logger = logging.getLogger("nonogram")
    logger.setLevel(level)

    # Calling twice (tests, re-runs) must not stack handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s', datefmt='%H:%M:%S'))
    logger.addHandler(handler)
    return logger
