# Argot Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Argot."""
import logging

logger: logging.Logger = logging.getLogger("argot")
