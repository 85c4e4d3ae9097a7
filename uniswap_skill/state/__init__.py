"""
In-process session state.
"""

from .session import Session, SessionStore

__all__ = ["Session", "SessionStore"]
