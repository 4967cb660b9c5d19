"""
Logging configuration for the MCP checker JUnit converter.

Console output goes to stderr; stdout is reserved for the XML document.
"""

import logging
import sys
from typing import Optional
from pathlib import Path


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output."""
    
    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[94m',      # Blue
        'WARNING': '\033[93m',   # Yellow
        'ERROR': '\033[91m',     # Red
        'CRITICAL': '\033[95m',  # Magenta
        'RESET': '\033[0m',      # Reset
        'BOLD': '\033[1m',       # Bold
    }
    
    def format(self, record):
        """Format log record with colors."""
        # Copy so other handlers (log file) see the plain record
        record = logging.makeLogRecord(record.__dict__)
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"
        
        if levelname in ['ERROR', 'CRITICAL']:
            record.msg = f"{self.COLORS['BOLD']}{record.msg}{self.COLORS['RESET']}"
        
        return super().format(record)


def verbosity_to_level(verbosity: int) -> int:
    """Map CLI verbosity (0-3) to a logging level."""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity <= 2:
        return logging.INFO
    return logging.DEBUG


def setup_logger(
    name: str = "mcpchecker_junit",
    level: Optional[int] = None,
    log_file: Optional[Path] = None,
    verbosity: int = 0
) -> logging.Logger:
    """
    Set up the package logger.
    
    Args:
        name: Logger name
        level: Logging level (overrides verbosity if provided)
        log_file: Optional log file path
        verbosity: Verbosity level (0=warnings, 1-2=progress, 3=debug)
        
    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    
    # Clear existing handlers
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    
    if level is None:
        level = verbosity_to_level(verbosity)
    
    logger.setLevel(level)
    
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logger.level)
    
    console_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    console_handler.setFormatter(ColoredFormatter(console_format))
    
    logger.addHandler(console_handler)
    
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        
        # Format for file (no colors)
        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_handler.setFormatter(logging.Formatter(file_format))
        
        logger.addHandler(file_handler)
        # File captures everything the console filters out
        logger.setLevel(logging.DEBUG)
    
    return logger


def get_logger(name: str = "mcpchecker_junit") -> logging.Logger:
    """Get logger instance."""
    return logging.getLogger(name)
