"""Utility functions for VolumeCtl."""
import logging
from pathlib import Path
from typing import List, Optional, Union

DEFAULT_LOG_DIR = Path.home() / '.volumectl' / 'logs'
LOG_FILE_NAME = 'volumectl.log'
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def setup_logging(debug=False, log_dir: Optional[Union[str, Path]] = None) -> Path:
    """Set up logging configuration and return the log file path."""
    log_level = logging.DEBUG if debug else logging.INFO
    log_dir = Path(log_dir) if log_dir else DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    # Configure root logger
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler() if debug else logging.NullHandler()
        ],
        force=True,
    )
    return log_file


def get_log_file() -> Optional[Path]:
    """Return the file the root logger writes to, if any."""
    handler = next(
        (h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)),
        None
    )
    return Path(handler.baseFilename) if handler else None


def split_lines(output: str) -> List[str]:
    """Split command output on newlines, dropping empty lines."""
    lines = (line.rstrip('\r') for line in (output or '').split('\n'))
    return [line for line in lines if line]
