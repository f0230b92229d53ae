from django.utils.dateparse import parse_date

from hotel_booking_service.exceptions import InvalidDates, InvalidRequest

MAX_CALENDAR_DAYS = 366


def parse_query_date(name, value):
    """Parse a YYYY-MM-DD query parameter, rejecting missing or malformed values."""
    if not value:
        raise InvalidRequest(detail=f"{name} is required")
    try:
        parsed = parse_date(value)
    except ValueError:
        parsed = None
    if parsed is None:
        raise InvalidRequest(detail=f"{name} must be a date in YYYY-MM-DD format")
    return parsed


def validate_calendar_range(query_params):
    """
    Return the (date_from, date_to) pair of a calendar request.

    Both ends are inclusive. A reversed range or one longer than
    MAX_CALENDAR_DAYS is rejected with INVALID_DATES.
    """
    date_from = parse_query_date("date_from", query_params.get("date_from"))
    date_to = parse_query_date("date_to", query_params.get("date_to"))

    if date_from > date_to:
        raise InvalidDates(detail="date_from must not be after date_to")
    if (date_to - date_from).days >= MAX_CALENDAR_DAYS:
        raise InvalidDates(detail=f"Calendar range is limited to {MAX_CALENDAR_DAYS} days")
    return date_from, date_to
