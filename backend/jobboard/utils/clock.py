from datetime import datetime, timedelta, timezone

# Microsecond precision keeps lexical order equal to chronological order.
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def utcnow_iso(offset_seconds: int = 0) -> str:
    moment = datetime.now(timezone.utc) + timedelta(seconds=offset_seconds)
    return moment.strftime(TIMESTAMP_FORMAT)


def to_iso(value: datetime) -> str:
    """Normalize an incoming datetime to the stored UTC text form.

    Naive datetimes are taken to be UTC already.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(TIMESTAMP_FORMAT)
