"""API routers for Videobrain."""

from videobrain.api.routers import creative, effects

__all__ = ["creative", "effects"]
