"""
linecounter Web API
===================
FastAPI-based REST API exposing the line counter.

Quick Start:
    uvicorn linecounter.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
