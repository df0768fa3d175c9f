from __future__ import annotations

import random
import sys
from datetime import date
from pathlib import Path
from typing import Any, Dict, List

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.domain.entities.space_weather import MetricFamily  # noqa: E402
from tests.fakes import FakeDonkiGateway  # noqa: E402

# Wednesday; the trailing window is Thu 2024-01-04 .. Wed 2024-01-10.
TODAY = date(2024, 1, 10)


@pytest.fixture()
def today() -> date:
    return TODAY


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def donki_payloads() -> Dict[MetricFamily, List[Dict[str, Any]]]:
    return {
        MetricFamily.CME: [
            {
                "activityID": "2024-01-08T12:00:00-CME-001",
                "startTime": "2024-01-08T12:00Z",
                "cmeAnalyses": [{"speed": 950.0, "isMostAccurate": True}],
            },
            {
                "activityID": "2024-01-10T01:00:00-CME-001",
                "startTime": "2024-01-10T01:00Z",
                "cmeAnalyses": None,
            },
        ],
        MetricFamily.GST: [
            {
                "gstID": "2024-01-09T21:00:00-GST-001",
                "startTime": "2024-01-09T21:00Z",
                "allKpIndex": [
                    {"observedTime": "2024-01-09T21:00Z", "kpIndex": 5.33},
                    {"observedTime": "2024-01-10T03:00Z", "kpIndex": 6},
                ],
            }
        ],
        MetricFamily.FLR: [
            {"flrID": "a", "beginTime": "2024-01-09T10:00Z", "classType": "C3.1"},
            {"flrID": "b", "beginTime": "2024-01-09T18:00Z", "classType": "M1.2"},
        ],
        MetricFamily.SEP: [
            {"sepID": "s1", "eventTime": "2024-01-10T05:00Z"},
        ],
    }


@pytest.fixture()
def fake_gateway(donki_payloads) -> FakeDonkiGateway:
    return FakeDonkiGateway(donki_payloads)
