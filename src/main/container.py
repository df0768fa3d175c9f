"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.models import SystemInfo
from src.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from src.application.use_cases.space_weather_use_cases import (
    GetMockSnapshotUseCase,
    GetSpaceWeatherSnapshotUseCase,
)
from src.infrastructure.gateways.donki_gateway import DonkiGateway
from src.infrastructure.services.health_check_service import HealthCheckService
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Gateways
    donki_gateway = providers.Singleton(
        DonkiGateway,
        base_url=config.donki.base_url,
        api_key=config.donki.api_key,
        timeout=config.donki.timeout,
    )

    # Infrastructure services
    health_check_service = providers.Singleton(
        HealthCheckService,
        donki_gateway=donki_gateway,
        offline=config.space_weather.offline,
    )

    # Application (use cases); a Factory gives every request a fresh cycle.
    get_snapshot_use_case = providers.Factory(
        GetSpaceWeatherSnapshotUseCase,
        donki_gateway=donki_gateway,
        offline=config.space_weather.offline,
    )

    get_mock_snapshot_use_case = providers.Factory(GetMockSnapshotUseCase)

    system_info = providers.Singleton(
        SystemInfo,
        title=config.ge.title,
        description=config.ge.description,
        version=config.ge.version,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
        git_commit=config.ge.git_commit,
        build_time=config.ge.build_time,
        donki_base_url=config.donki.base_url,
        donki_api_key=config.donki.api_key,
        offline=config.space_weather.offline,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        health_check_service=health_check_service,
        system_info=system_info,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for container resources.

    The service holds no connections between requests (every fetch cycle
    opens its own HTTP client), so startup only reports the upstream mode.
    """
    container = get_container()
    offline = bool(container.config.space_weather.offline())

    try:
        logger.info(
            "container.resources.initialized",
            donki_base_url=container.config.donki.base_url(),
            offline=offline,
        )
        yield container
    finally:
        logger.info("container.resources.shutdown")
