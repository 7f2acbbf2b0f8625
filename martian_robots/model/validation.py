"""Raw token parsing shared by surface construction and robot placement."""

import re
from typing import Optional, Union

# Upper bounds for coordinate values and command sequence lengths
MAX_COORDINATE = 50
MAX_COMMAND_LENGTH = 100

_INTEGER = re.compile(r'^[+-]?[0-9]+$')

RawToken = Union[str, int, None]


def normalize_token(raw: RawToken) -> Optional[str]:
    """Turn a raw token into stripped text, or None when it is empty."""
    if raw is None:
        return None
    text = str(raw).strip()
    return text or None


def parse_int(text: str) -> Optional[int]:
    """Parse a decimal integer token; None if it is not one."""
    if not _INTEGER.match(text):
        return None
    return int(text)
