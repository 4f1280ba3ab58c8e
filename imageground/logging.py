"""Logging initialization using loguru."""

import sys
from pathlib import Path

from loguru import logger


def init_logging(log_dir=None, level='INFO'):
    """Log to stderr, plus a rotating file under `log_dir` when given."""
    logger.remove()
    logger.add(sys.stderr, level=level)
    if not log_dir:
        return None

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    logger.add(
        str(log_path / 'imageground_{time:YYYYMMDD}.log'),
        rotation='10 MB',
        retention='10 days',
        compression='zip',
        enqueue=True,
        backtrace=False,
        diagnose=False,
        level=level,
    )
    return log_path
