"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle
HTTP requests and responses. Controllers are responsible for
error handling and mapping between API DTOs and application layer
use cases.
"""

from .space_weather_controller import router as space_weather_router
from .system_controller import router as system_router

__all__ = ["space_weather_router", "system_router"]
