"""Logging configuration for last-interview"""
import logging
from datetime import datetime
from pathlib import Path

from rich.logging import RichHandler

LOG_DIR = Path("logs")


class LogManager:
    """Centralized logging configuration"""
    def __init__(self, name: str = "last_interview"):
        # Set up logging with rich handler
        logging.basicConfig(
            level="INFO",
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(rich_tracebacks=True)]
        )
        self.log = logging.getLogger(name)

    def setup(self, log_level: str) -> None:
        """Configure logging based on the specified level"""
        numeric_level = getattr(logging, log_level.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError(f"Invalid log level: {log_level}")

        self.log.setLevel(numeric_level)
        if log_level.upper() == "DEBUG":
            LOG_DIR.mkdir(exist_ok=True)

            # Add file handler for debug logging
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            debug_handler = logging.FileHandler(LOG_DIR / f"last_interview_{timestamp}.log")
            debug_handler.setLevel(logging.DEBUG)
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            debug_handler.setFormatter(formatter)
            self.log.addHandler(debug_handler)
            self.log.debug("Debug logging enabled")

    def get_logger(self):
        """Get the configured logger"""
        return self.log
