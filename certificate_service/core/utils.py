import random
import string

from datetime import datetime, timezone
from pathlib import Path

HEX_DIGITS = '0123456789abcdef'
SERIAL_CHARS = string.ascii_uppercase + string.digits


def read_secret(name: str) -> str:
    """Reads a docker secret file, empty string when it is not available"""
    if not name:
        return ''

    path = Path(name)
    if not path.is_file():
        return ''

    return path.read_text(encoding='utf-8').strip()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def isoformat_z(value: datetime) -> str:
    """ISO-8601 in UTC with milliseconds, e.g. 2024-01-10T00:00:00.000Z"""
    value = value.astimezone(timezone.utc)
    return value.strftime('%Y-%m-%dT%H:%M:%S.') + f'{value.microsecond // 1000:03d}Z'


def add_calendar_year(value: datetime) -> datetime:
    """
    Same month and day of the following year.
    29 February rolls over to 1 March.
    """
    try:
        return value.replace(year=value.year + 1)
    except ValueError:
        return value.replace(year=value.year + 1, month=3, day=1)


# Mock identifiers: general purpose PRNG, not suitable for secrets

def generate_mock_token_id() -> str:
    return str(random.randrange(10000))


def generate_mock_transaction_hash() -> str:
    return '0x' + ''.join(random.choice(HEX_DIGITS) for _ in range(64))


def generate_mock_serial_number() -> str:
    return ''.join(random.choice(SERIAL_CHARS) for _ in range(6))
