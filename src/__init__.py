"""
Source Code Root Module

Cosmic Forecast: space weather snapshots derived from NASA DONKI.

Layer Structure:
- Domain: Space weather entities and the normalization services
- Application: Use cases and DTOs
- Infrastructure: DONKI HTTP gateway and health checks
- Presentation: FastAPI controllers
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
