"""API routes package"""

from . import auth, health, recipes

__all__ = ["auth", "health", "recipes"]
