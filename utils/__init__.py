"""
Utilities package for the Wordly widget
"""

from .logger_setup import setup_logger
from .html_renderer import HtmlRenderer

__all__ = [
    "setup_logger",
    "HtmlRenderer"
]
