"""Utils for Password Policy.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from datetime import datetime, timezone


def as_utc(value: datetime) -> datetime:
    """Convert datetime to UTC, naive values are considered UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def count_password_age_days(
    last_modified: datetime,
    now: datetime | None = None,
) -> int:
    """Get number of whole days passed since password modification.

    :param datetime last_modified: password modification time
    :param datetime | None now: reference time, current UTC time if omitted
    :return int: days
    """
    now_dt = as_utc(now) if now else datetime.now(tz=timezone.utc)
    return (now_dt - as_utc(last_modified)).days
