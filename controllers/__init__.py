"""
Controllers package for the Wordly widget
"""

from .query_controller import QueryController
from .view_state import ViewState

__all__ = [
    "QueryController",
    "ViewState"
]
