"""
Al-Shahid Academy student service.
"""

__version__ = "0.1.0"
