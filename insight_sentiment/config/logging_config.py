"""
Logging Configuration for Insight Sentiment

This module provides centralized logging configuration for the service.
Logs are output to both console and a timestamped file in the log directory.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path


def setup_logging(log_dir: Path | str = "logs", log_level: str = "INFO") -> logging.Logger:
    """
    Configure logging for the Insight Sentiment service.

    Creates a logger that outputs to both console and a log file.
    Log files are stored in the specified directory with timestamps.

    Args:
        log_dir: Directory where log files will be stored
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance for the application
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f"insight_sentiment_{timestamp}.log"

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    # Root logger captures library logs as well
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    logger = logging.getLogger("insight_sentiment")
    logger.setLevel(numeric_level)

    detailed_formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_formatter = logging.Formatter(
        fmt="%(levelname)s - %(message)s"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(console_formatter)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(numeric_level)
    file_handler.setFormatter(detailed_formatter)

    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    # Noisy HTTP libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    # uvicorn and FastAPI keep their own console handlers; mirror them to the
    # log file without duplicating console lines.
    for server_logger_name in [
        "uvicorn",
        "uvicorn.error",
        "uvicorn.access",
        "fastapi",
    ]:
        server_logger = logging.getLogger(server_logger_name)
        server_logger.setLevel(numeric_level)
        server_logger.addHandler(file_handler)

    logger.info("Logging initialized - Log file: %s", log_file)

    return logger


def get_logger(name: str = "insight_sentiment") -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Name of the logger (typically __name__ of the module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
