"""FastAPI REST API for wardrobe pricing.

This module provides a REST API for computing cut lists and door metrics,
pricing quotes with rule adjustments, and validating rule sets.

Usage:
    uvicorn wardrobes.web:app --reload
"""

from wardrobes.web.app import app, create_app

__all__ = ["app", "create_app"]
