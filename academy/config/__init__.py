"""
Configuration package for the academy service.

Contains environment settings and logging configuration.
"""

from academy.config.settings import settings, get_settings
from academy.config.logging import setup_logging, get_logger

__all__ = ['settings', 'get_settings', 'setup_logging', 'get_logger']
