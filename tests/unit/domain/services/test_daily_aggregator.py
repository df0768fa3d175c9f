from __future__ import annotations

from datetime import date

from src.domain.entities.space_weather import FlareReading, MetricFamily
from src.domain.services.daily_aggregator import (
    aggregate_cme_speeds,
    aggregate_events,
    aggregate_flares,
    aggregate_kp_indices,
    aggregate_sep_counts,
    parse_utc_date,
)


def test_parse_utc_date_handles_donki_formats() -> None:
    assert parse_utc_date("2024-01-10T03:00Z") == date(2024, 1, 10)
    assert parse_utc_date("2024-01-10T03:00:00Z") == date(2024, 1, 10)
    assert parse_utc_date("2024-01-10T03:00:00") == date(2024, 1, 10)


def test_parse_utc_date_normalizes_offsets_to_utc() -> None:
    # 23:30 at -05:00 is already the next UTC day.
    assert parse_utc_date("2024-01-09T23:30:00-05:00") == date(2024, 1, 10)
    assert parse_utc_date("2024-01-10T01:00:00+02:00") == date(2024, 1, 9)


def test_parse_utc_date_rejects_garbage() -> None:
    assert parse_utc_date("yesterday") is None
    assert parse_utc_date("") is None
    assert parse_utc_date(None) is None
    assert parse_utc_date(1704855600) is None


def test_single_gst_observation_example() -> None:
    events = [
        {"allKpIndex": [{"observedTime": "2024-01-10T03:00:00Z", "kpIndex": 5}]}
    ]
    assert aggregate_kp_indices(events) == {date(2024, 1, 10): 5}


def test_kp_takes_max_across_storms_and_observations() -> None:
    events = [
        {
            "allKpIndex": [
                {"observedTime": "2024-01-09T03:00Z", "kpIndex": 4},
                {"observedTime": "2024-01-09T06:00Z", "kpIndex": 6.33},
            ]
        },
        {"allKpIndex": [{"observedTime": "2024-01-09T09:00Z", "kpIndex": 5}]},
    ]
    assert aggregate_kp_indices(events) == {date(2024, 1, 9): 6.33}


def test_kp_skips_bad_sub_observations() -> None:
    events = [
        {
            "allKpIndex": [
                {"observedTime": "not-a-time", "kpIndex": 8},
                {"observedTime": "2024-01-09T06:00Z", "kpIndex": "high"},
                {"observedTime": "2024-01-09T09:00Z", "kpIndex": 3},
            ]
        },
        {"allKpIndex": None},
        "garbage",
    ]
    assert aggregate_kp_indices(events) == {date(2024, 1, 9): 3}


def test_cme_without_analysis_contributes_zero() -> None:
    events = [
        {"startTime": "2024-01-08T01:00Z", "cmeAnalyses": None},
        {"startTime": "2024-01-09T01:00Z", "cmeAnalyses": []},
        {"startTime": "2024-01-09T05:00Z", "cmeAnalyses": [{"speed": 700}]},
    ]
    assert aggregate_cme_speeds(events) == {
        date(2024, 1, 8): 0.0,
        date(2024, 1, 9): 700.0,
    }


def test_cme_skips_malformed_timestamps_without_failing_batch() -> None:
    events = [
        {"startTime": None, "cmeAnalyses": [{"speed": 2000}]},
        {"cmeAnalyses": [{"speed": 1500}]},
        {"startTime": "2024-01-09T05:00Z", "cmeAnalyses": [{"speed": 600}]},
    ]
    assert aggregate_cme_speeds(events) == {date(2024, 1, 9): 600.0}


def test_flares_keep_strongest_class_per_day() -> None:
    events = [
        {"beginTime": "2024-01-09T01:00Z", "classType": "C9.9"},
        {"beginTime": "2024-01-09T02:00Z", "classType": "M1.0"},
        {"beginTime": "2024-01-09T03:00Z", "classType": "B5.0"},
    ]
    assert aggregate_flares(events) == {
        date(2024, 1, 9): FlareReading(intensity=41.0, class_type="M1.0")
    }


def test_flare_ties_keep_earliest_seen() -> None:
    events = [
        {"beginTime": "2024-01-09T01:00Z", "classType": "M1.0"},
        {"beginTime": "2024-01-09T02:00Z", "classType": "m1.0"},
    ]
    assert aggregate_flares(events)[date(2024, 1, 9)].class_type == "M1.0"


def test_unparseable_flare_class_counts_as_zero_intensity() -> None:
    events = [{"beginTime": "2024-01-09T01:00Z", "classType": None}]
    assert aggregate_flares(events) == {
        date(2024, 1, 9): FlareReading(intensity=0.0, class_type="")
    }


def test_max_reductions_ignore_duplicates() -> None:
    cme = {"startTime": "2024-01-09T05:00Z", "cmeAnalyses": [{"speed": 600}]}
    flare = {"beginTime": "2024-01-09T01:00Z", "classType": "X1.0"}
    gst = {"allKpIndex": [{"observedTime": "2024-01-09T09:00Z", "kpIndex": 7}]}

    assert aggregate_cme_speeds([cme, cme]) == aggregate_cme_speeds([cme])
    assert aggregate_flares([flare, flare]) == aggregate_flares([flare])
    assert aggregate_kp_indices([gst, gst]) == aggregate_kp_indices([gst])


def test_sep_counts_increment_per_event_including_duplicates() -> None:
    event = {"eventTime": "2024-01-09T05:00Z"}
    events = [event, event, {"eventTime": "2024-01-10T05:00Z"}, {"eventTime": ""}]
    assert aggregate_sep_counts(events) == {
        date(2024, 1, 9): 2,
        date(2024, 1, 10): 1,
    }


def test_aggregate_events_dispatches_by_family(donki_payloads) -> None:
    result = aggregate_events(MetricFamily.SEP, donki_payloads[MetricFamily.SEP])
    assert result == {date(2024, 1, 10): 1}


def test_empty_input_yields_empty_aggregate() -> None:
    for family in MetricFamily:
        assert aggregate_events(family, []) == {}
