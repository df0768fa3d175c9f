"""
Application Layer Package

This package contains the application-specific business rules
and use cases. It orchestrates the flow of data between the DONKI
gateway and the domain services and maps results to DTOs.
"""

# Re-export submodules
from src.application import dtos, models, use_cases

__all__ = ["dtos", "use_cases", "models"]
