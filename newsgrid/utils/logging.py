"""Logging configuration for newsgrid."""

import logging
from datetime import datetime
from pathlib import Path

from newsgrid.utils.files import get_logs_path


def setup_local_logging(level: str = 'DEBUG', logs_dir: Path | None = None) -> Path:
    """Set up local file-based logging.

    Creates a log file in .newsgrid/logs/ and configures the root logger
    to write to it. Console output is left to rich.

    Args:
        level: Logging level (e.g., 'DEBUG', 'INFO'). Defaults to 'DEBUG'.
        logs_dir: Directory for log files. Defaults to .newsgrid/logs/ in the project root.

    Returns:
        Path: The path to the created log file.

    """
    logs_dir = logs_dir or get_logs_path()
    logs_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    log_file = logs_dir / f'run_{timestamp}.log'

    if level.upper() == 'ALL':
        numeric_level = logging.NOTSET
    else:
        numeric_level = getattr(logging, level.upper(), logging.DEBUG)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(numeric_level)
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    root_logger.addHandler(file_handler)

    return log_file
