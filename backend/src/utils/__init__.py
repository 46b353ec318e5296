"""
Utility modules for the Notification API backend.

This package contains shared utilities used across the application:
- logging_config: Named, structured loggers (api, services, db)
"""

from backend.src.utils.logging_config import get_logger, init_logging

__all__ = [
    "get_logger",
    "init_logging",
]
