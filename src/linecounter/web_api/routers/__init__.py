"""
API Routers
===========
Each router handles a specific domain of the API.
"""
from . import count, health

__all__ = ["count", "health"]
