"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer: the DONKI HTTP gateway and the health check service.
"""

from src.infrastructure import gateways, services

__all__ = ["gateways", "services"]
