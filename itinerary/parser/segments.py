"""
Response cleanup and day segmentation.
"""

import re
from typing import List, Optional, Tuple

_EMPHASIS = re.compile(r"[*_]")

# "Day 3:" / "Day 3 -" / "Day 3 –"
DAY_LABEL_PATTERN = re.compile(r"Day\s+\d+\s*[:\-–]")

CHECK_IN_PATTERN = re.compile(r"check[- ]in:?\s*(\d{1,2}:\d{2})", re.IGNORECASE)
CHECK_OUT_PATTERN = re.compile(r"check[- ]out:?\s*(\d{1,2}:\d{2})", re.IGNORECASE)


def clean_response_text(text: str) -> str:
    """Strip markdown emphasis markers the model likes to add."""
    return _EMPHASIS.sub("", text)


def segment_days(text: str) -> List[str]:
    """
    Split a response into per-day text segments.

    Each "Day N:" label starts a segment that runs to the next label or the
    end of the text. Labels themselves and any preamble before the first
    label are discarded, as are segments that are blank once trimmed.
    Returns an empty list when no label is found.
    """
    labels = list(DAY_LABEL_PATTERN.finditer(text))
    segments = []
    for i, label in enumerate(labels):
        end = labels[i + 1].start() if i + 1 < len(labels) else len(text)
        segment = text[label.end():end].strip()
        if segment:
            segments.append(segment)
    return segments


def extract_stay_times(day_text: str) -> Tuple[Optional[str], Optional[str]]:
    """Return (check_in, check_out) times found in a day, None when absent."""
    check_in = CHECK_IN_PATTERN.search(day_text)
    check_out = CHECK_OUT_PATTERN.search(day_text)
    return (
        check_in.group(1) if check_in else None,
        check_out.group(1) if check_out else None,
    )
