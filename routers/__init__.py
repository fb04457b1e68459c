"""
API Routers for Grid Layout Service
"""

from . import layout_router

__all__ = [
    "layout_router"
]
