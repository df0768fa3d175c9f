"""
Domain service reducing raw DONKI events to per-day values.

Events are bucketed by the UTC calendar day of their timestamp. Max-type
reductions only replace a stored value when the new one is strictly
greater, so the earliest-seen value wins ties. Records with a missing or
unparseable timestamp are skipped without failing the batch.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, TypeVar

from src.domain.entities.space_weather import DailyAggregate, FlareReading, MetricFamily
from src.domain.services.flare_codec import flare_class_to_number
from src.shared import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

CME_TIME_FIELD = "startTime"
GST_OBSERVATIONS_FIELD = "allKpIndex"
GST_TIME_FIELD = "observedTime"
FLR_TIME_FIELD = "beginTime"
SEP_TIME_FIELD = "eventTime"


def parse_utc_date(value: Any) -> Optional[date]:
    """Return the UTC calendar day of an ISO 8601 timestamp, or None.

    Naive timestamps are taken as UTC. DONKI emits both ``...T03:00Z`` and
    ``...T03:00:00Z`` forms.
    """
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = f"{text[:-1]}+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        return parsed.date()
    return parsed.astimezone(timezone.utc).date()


def _as_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _keep_max(
    aggregate: Dict[date, T],
    day: date,
    value: T,
    key: Callable[[T], float],
) -> None:
    current = aggregate.get(day)
    if current is None or key(value) > key(current):
        aggregate[day] = value


def _event_day(event: Any, field: str, family: MetricFamily) -> Optional[date]:
    if not isinstance(event, Mapping):
        logger.debug("aggregator.record_skipped", family=family.value, reason="type")
        return None

    day = parse_utc_date(event.get(field))
    if day is None:
        logger.debug(
            "aggregator.record_skipped",
            family=family.value,
            reason="timestamp",
            value=event.get(field),
        )
    return day


def _cme_speed(event: Mapping[str, Any]) -> float:
    analyses = event.get("cmeAnalyses")
    if not isinstance(analyses, list) or not analyses:
        return 0.0
    first = analyses[0]
    if not isinstance(first, Mapping):
        return 0.0
    return _as_number(first.get("speed")) or 0.0


def aggregate_cme_speeds(events: Iterable[Any]) -> DailyAggregate[float]:
    """Maximum CME speed per day; a CME without analysis counts as 0."""
    aggregate: Dict[date, float] = {}
    for event in events:
        day = _event_day(event, CME_TIME_FIELD, MetricFamily.CME)
        if day is None:
            continue
        _keep_max(aggregate, day, _cme_speed(event), key=float)
    return aggregate


def aggregate_kp_indices(events: Iterable[Any]) -> DailyAggregate[float]:
    """Maximum Kp per day across every storm's sub-observations."""
    aggregate: Dict[date, float] = {}
    for event in events:
        if not isinstance(event, Mapping):
            logger.debug("aggregator.record_skipped", family="GST", reason="type")
            continue

        observations = event.get(GST_OBSERVATIONS_FIELD)
        if not isinstance(observations, list):
            continue

        for observation in observations:
            day = _event_day(observation, GST_TIME_FIELD, MetricFamily.GST)
            if day is None:
                continue
            kp = _as_number(observation.get("kpIndex"))
            if kp is None:
                logger.debug(
                    "aggregator.record_skipped",
                    family="GST",
                    reason="kp_index",
                    value=observation.get("kpIndex"),
                )
                continue
            _keep_max(aggregate, day, kp, key=float)
    return aggregate


def aggregate_flares(events: Iterable[Any]) -> DailyAggregate[FlareReading]:
    """Strongest flare per day, keeping the original class string."""
    aggregate: Dict[date, FlareReading] = {}
    for event in events:
        day = _event_day(event, FLR_TIME_FIELD, MetricFamily.FLR)
        if day is None:
            continue
        class_type = event.get("classType")
        reading = FlareReading(
            intensity=flare_class_to_number(class_type),
            class_type=class_type if isinstance(class_type, str) else "",
        )
        _keep_max(aggregate, day, reading, key=lambda item: item.intensity)
    return aggregate


def aggregate_sep_counts(events: Iterable[Any]) -> DailyAggregate[int]:
    """Number of particle events per day."""
    aggregate: Dict[date, int] = {}
    for event in events:
        day = _event_day(event, SEP_TIME_FIELD, MetricFamily.SEP)
        if day is None:
            continue
        aggregate[day] = aggregate.get(day, 0) + 1
    return aggregate


AGGREGATORS: Dict[MetricFamily, Callable[[Iterable[Any]], DailyAggregate[Any]]] = {
    MetricFamily.CME: aggregate_cme_speeds,
    MetricFamily.GST: aggregate_kp_indices,
    MetricFamily.FLR: aggregate_flares,
    MetricFamily.SEP: aggregate_sep_counts,
}


def aggregate_events(
    family: MetricFamily, events: Iterable[Any]
) -> DailyAggregate[Any]:
    """Apply the reduction rule registered for ``family``."""
    return AGGREGATORS[family](events)
