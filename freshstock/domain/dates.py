from datetime import date, datetime

DATE_FORMAT = "%Y-%m-%d"


def parse_date(value: str) -> date:
    """
    Parse a yyyy-mm-dd string.

    Raises:
        ValueError: If the value does not match the format
    """
    if not isinstance(value, str):
        raise ValueError(f"expected a date string, got {type(value).__name__}")
    return datetime.strptime(value, DATE_FORMAT).date()


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def normalize_date(value: str) -> str:
    """Parse and re-format, so stored dates are always zero padded"""
    return format_date(parse_date(value))


def local_today() -> date:
    """Calendar date of the server's local clock"""
    return date.today()
