import json
import logging
from dataclasses import dataclass
from datetime import datetime

from dateutil import parser as date_parser
from django.utils import timezone

from .exceptions import InvalidDateError, InvalidFeedError, InvalidGtinError

logger = logging.getLogger(__name__)

PRODUCTS_KEY = 'products'


def parse_feed(content) -> list:
    """
    Decode the feed body and return its list of raw product entries.

    Entries are returned unvalidated and in feed order; FeedEntry.from_raw
    validates each one when the importer reaches it.
    """
    try:
        document = json.loads(content)
    except ValueError as exc:
        raise InvalidFeedError(f"Invalid JSON received: {exc}") from exc

    if not isinstance(document, dict):
        raise InvalidFeedError(
            f"Expected a JSON object at the top level, got {type(document).__name__}."
        )

    entries = document.get(PRODUCTS_KEY)
    if not isinstance(entries, list):
        raise InvalidFeedError(f"Feed has no {PRODUCTS_KEY!r} list.")

    logger.debug("Feed contains %d entries.", len(entries))
    return entries


def parse_date(value) -> datetime:
    """Parse a feed date string into an aware datetime (current timezone if naive)."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidDateError(f"Date is not a valid string: {value!r}")
    try:
        parsed = date_parser.parse(value)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(f"Could not parse date {value!r}: {exc}") from exc

    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed)
    return parsed


def _clean_gtin(value) -> str:
    # JSON numbers are accepted; booleans are not trade item numbers.
    if isinstance(value, bool):
        value = None
    elif isinstance(value, int):
        value = str(value)

    if not isinstance(value, str) or not value.strip():
        raise InvalidGtinError(f"GTIN is not valid string: {value!r}")
    return value.strip()


@dataclass(frozen=True)
class FeedEntry:
    gtin: str
    name: str
    date: str
    image_url: str

    @classmethod
    def from_raw(cls, raw) -> 'FeedEntry':
        if not isinstance(raw, dict):
            raise InvalidFeedError(f"Feed entry must be an object, got {type(raw).__name__}.")

        gtin = _clean_gtin(raw.get('gtin'))

        name = raw.get('name')
        if isinstance(name, (int, float)) and not isinstance(name, bool):
            name = str(name)
        if not isinstance(name, str):
            raise InvalidFeedError(f"GTIN: {gtin} - name is missing or not a string.")

        image_url = raw.get('image') or ''
        if not isinstance(image_url, str):
            image_url = ''

        return cls(gtin=gtin, name=name, date=raw.get('date'), image_url=image_url)
