from datetime import datetime, timezone
from typing import Iterable, List

from email_validator import validate_email, EmailNotValidError
from pydantic import HttpUrl, TypeAdapter, ValidationError

from journey.core.errors import ErrorCode, ValidationFailedError

_http_url = TypeAdapter(HttpUrl)


def to_naive_utc(value: datetime) -> datetime:
    """Stored timestamps are naive UTC; aware inputs are converted first."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def validate_email_address(email: str) -> str:
    try:
        result = validate_email(email, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValidationFailedError(f"invalid email {email!r}: {e}", code=ErrorCode.INVALID_EMAIL) from e
    return result.normalized


def validate_emails(emails: Iterable[str]) -> List[str]:
    """
    Validates every address before anything is written.
    Returns normalized addresses, first occurrence wins on duplicates.
    """
    normalized: List[str] = []
    for email in emails:
        address = validate_email_address(email)
        if address not in normalized:
            normalized.append(address)

    if not normalized:
        raise ValidationFailedError("at least one email is required", code=ErrorCode.INVALID_EMAIL)
    return normalized


def validate_url(url: str) -> str:
    try:
        _http_url.validate_python(url)
    except ValidationError as e:
        raise ValidationFailedError(f"invalid url {url!r}", code=ErrorCode.INVALID_URL) from e
    return url


def validate_date_range(starts_at: datetime, ends_at: datetime) -> None:
    if to_naive_utc(ends_at) < to_naive_utc(starts_at):
        raise ValidationFailedError(
            f"ends_at {ends_at.isoformat()} is earlier than starts_at {starts_at.isoformat()}",
            code=ErrorCode.INVALID_DATE_RANGE,
        )


def validate_within_window(occurs_at: datetime, starts_at: datetime, ends_at: datetime) -> None:
    if not to_naive_utc(starts_at) <= to_naive_utc(occurs_at) <= to_naive_utc(ends_at):
        raise ValidationFailedError(
            f"occurs_at {occurs_at.isoformat()} is outside {starts_at.isoformat()}..{ends_at.isoformat()}",
            code=ErrorCode.ACTIVITY_OUTSIDE_TRIP,
        )
