"""Logging configuration for the application."""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

from app.core.config import settings

def setup_logging(service_name: str, logger_name: str = "app", level: Optional[str] = None, log_to_file: Optional[bool] = None) -> logging.Logger:
    """
    Set up logging for a service with a console handler and, optionally, a file handler.
    
    Args:
        service_name: Name of the service, used for the log file name
        logger_name: Logger to configure; module loggers below it propagate to it
        level: Console log level, defaults to settings.LOG_LEVEL
        log_to_file: Whether to also write a timestamped log file under settings.LOG_DIR
        
    Returns:
        Configured logger instance
    """
    level = level or settings.LOG_LEVEL
    if log_to_file is None:
        log_to_file = settings.LOG_TO_FILE

    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.DEBUG)
    
    # Prevent duplicate handlers
    if logger.handlers:
        return logger
    
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level.upper())
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    
    if log_to_file:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        file_handler = logging.FileHandler(
            log_dir / f"{service_name}_{timestamp}.log"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    
    return logger
