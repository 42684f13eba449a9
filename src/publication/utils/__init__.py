"""Utility modules for Publication.

Provides:
- logger: get_logger for namespaced logging
"""

from publication.utils.logger import get_logger

__all__ = ["get_logger"]
