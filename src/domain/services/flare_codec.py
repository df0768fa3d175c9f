"""Domain service converting X-ray flare classes to comparable numbers."""

import math
from typing import Any, Dict

# Each class letter is one decade of peak flux; the magnitude refines it.
FLARE_CLASS_OFFSETS: Dict[str, float] = {
    "A": 10.0,
    "B": 20.0,
    "C": 30.0,
    "M": 40.0,
    "X": 50.0,
}


def flare_class_to_number(flare_class: Any) -> float:
    """Map a flare class such as ``"M5.5"`` to a totally ordered intensity.

    ``A < B < C < M < X`` regardless of magnitude, then by magnitude within a
    letter: ``"X2.5"`` is 52.5 and ``"C1"`` is 31. Upstream text is not
    validated, so empty, unknown or unparseable input maps to 0 instead of
    raising.
    """
    if not isinstance(flare_class, str):
        return 0.0

    text = flare_class.strip()
    if not text:
        return 0.0

    offset = FLARE_CLASS_OFFSETS.get(text[0].upper())
    if offset is None:
        return 0.0

    magnitude_text = text[1:].strip()
    if not magnitude_text:
        return offset

    try:
        magnitude = float(magnitude_text)
    except ValueError:
        return 0.0

    if not math.isfinite(magnitude) or magnitude < 0:
        return 0.0

    return offset + magnitude
