"""
Health domain entities.

Availability of the upstream data source as seen from this service.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional


class ServiceStatus(str, Enum):
    """High-level availability for a dependency or the system."""

    UP = "up"
    DEGRADED = "degraded"
    DOWN = "down"
    UNKNOWN = "unknown"


@dataclass(slots=True)
class DependencyStatus:
    """Result of probing one external dependency."""

    name: str
    status: ServiceStatus
    message: Optional[str] = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    latency_ms: Optional[float] = None
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class SystemHealth:
    status: ServiceStatus
    dependencies: List[DependencyStatus] = field(default_factory=list)

    @classmethod
    def from_dependencies(cls, statuses: Iterable[DependencyStatus]) -> "SystemHealth":
        """Worst dependency wins; DOWN > DEGRADED > UNKNOWN > UP."""
        dependencies = list(statuses)
        found = {dependency.status for dependency in dependencies}

        for candidate in (
            ServiceStatus.DOWN,
            ServiceStatus.DEGRADED,
            ServiceStatus.UNKNOWN,
        ):
            if candidate in found:
                return cls(status=candidate, dependencies=dependencies)
        return cls(status=ServiceStatus.UP, dependencies=dependencies)
