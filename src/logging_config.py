"""Logging configuration with console and optional rotating file handlers"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


def setup_logging(log_file: Optional[str] = None, console_level: int = logging.WARNING, file_level: int = logging.DEBUG):
    """
    Configure logging with up to two destinations:
    - Console (stderr): Brief logs (WARNING by default, stdout carries stems)
    - File: Detailed logs (DEBUG by default) with rotation, only if log_file is given

    Rotation policy:
    - Auto-rotate when file reaches 10MB
    - Keep 5 old files

    Args:
        log_file: Path to log file, or None for console only
        console_level: Console logging level
        file_level: File logging level
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything, filter in handlers

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    # Console handler - brief output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            mode='a',
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(file_handler)

    # NLTK and whoosh are quiet by default, but keep them out of the console
    logging.getLogger("nltk").setLevel(logging.WARNING)

    logging.debug(
        f"Logging configured: console={logging.getLevelName(console_level)}, "
        f"file={log_file or 'disabled'} ({logging.getLevelName(file_level)})"
    )
