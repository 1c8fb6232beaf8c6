"""
Activity extraction.

An activity is a span that starts with a time token, either a single
"HH:MM" or a range "HH:MM - HH:MM", and runs to the end of its line, e.g.:

    09:00 - 10:30 City Palace (Jaleb Chowk, Jaipur) ₹500
    Morning: 09:00 - 10:30 City Palace (Jaleb Chowk, Jaipur) ₹500

A time token alone on its line takes its text from the next line. Times
labelled as check-in or check-out are not activities.
"""

import asyncio
import logging
import re
from dataclasses import dataclass
from typing import List

from itinerary.geocoding.resolver import locate
from itinerary.parser.context import ParseContext
from itinerary.parser.costs import find_cost, normalize_activity_cost, strip_cost
from itinerary.shared.contracts.travel_plan import Activity


logger = logging.getLogger(__name__)

_TIME = r"\d{1,2}:\d{2}"

ACTIVITY_PATTERN = re.compile(
    rf"(?<![\d:])(?P<time>{_TIME}(?:[ \t]*[-–][ \t]*{_TIME})?)(?![\d:])"
    r"(?P<gap>[ \t]*\n?[ \t]*)"
    # the range is all-or-nothing and the text never starts with another time
    rf"(?![-–]?[ \t]*{_TIME})"
    r"(?P<text>[^(\s][^\n]*)"
)

STAY_LABEL_PATTERN = re.compile(r"check[- ]?(?:in|out):?\s*$", re.IGNORECASE)

_BULLET_PREFIX = re.compile(r"^[ \t]*(?:[-•]|\d+\.)?[ \t]*$")

ADDRESS_PATTERN = re.compile(r"\(([^)]+)\)")


@dataclass(frozen=True)
class _Candidate:
    time: str
    name: str
    description: str
    address: str
    cost: int


def _read_candidate(time: str, text: str, context: ParseContext) -> _Candidate:
    text = text.strip().lstrip("-–:").strip()

    address_match = ADDRESS_PATTERN.search(text)
    address = address_match.group(1).strip() if address_match else ""

    raw_cost = find_cost(text) or 0
    cost = normalize_activity_cost(
        raw_cost,
        context.number_of_travelers,
        context.config.per_person_cost_threshold,
    )

    description = strip_cost(text)
    name = strip_cost(text.split("(")[0]).rstrip(" -–:,")

    return _Candidate(
        time=time.strip(),
        name=name or description,
        description=description,
        address=address,
        cost=cost,
    )


def _starts_activity(day_text: str, match: re.Match) -> bool:
    line_start = day_text.rfind("\n", 0, match.start()) + 1
    prefix = day_text[line_start:match.start()]
    if STAY_LABEL_PATTERN.search(prefix):
        return False
    # only a time standing alone on its line borrows the next line
    if "\n" in match.group("gap") and not _BULLET_PREFIX.match(prefix):
        return False
    return True


def find_activity_candidates(day_text: str, context: ParseContext) -> List[_Candidate]:
    """Locate timed spans in a day segment, in text order."""
    candidates = []
    pos = 0
    while True:
        match = ACTIVITY_PATTERN.search(day_text, pos)
        if match is None:
            break
        if not _starts_activity(day_text, match):
            pos = match.end("time")
            continue
        pos = match.end()
        candidates.append(_read_candidate(match.group("time"), match.group("text"), context))
    return candidates


async def extract_activities(day_text: str, context: ParseContext) -> List[Activity]:
    """
    Extract the activities of one day.

    Locations are resolved concurrently; the result keeps the order in
    which activities appear in the text. A segment without timed lines
    yields an empty list.
    """
    candidates = find_activity_candidates(day_text, context)
    if not candidates:
        return []

    locations = await asyncio.gather(
        *(locate(context.geocoder, c.address, context.destination) for c in candidates)
    )

    return [
        Activity(
            name=c.name,
            description=c.description,
            time=c.time,
            cost=c.cost,
            location=location,
            address=c.address,
        )
        for c, location in zip(candidates, locations)
    ]
