"""
Domain Layer Package

This package contains the core business logic and rules of the application:
space weather entities, the normalization services and the gateway/port
contracts, without dependencies on external frameworks or infrastructure.
"""

# Re-export submodules
from src.domain import entities, gateways, ports, services

__all__ = ["entities", "gateways", "services", "ports"]
