"""
Masking helpers for daemon addresses written to the logs.

Startup logs record where the proxy forwards requests. Only enough of the
address is kept to recognise it:
- IPv4 addresses keep their first and last octet
- Hostnames keep a couple of characters at each end
"""

import re
from typing import Optional

_IPV4_PATTERN = re.compile(r'^(\d{1,3})\.(\d{1,3})\.(\d{1,3})\.(\d{1,3})$')


def mask_partial(value: Optional[str], show_start: int = 2, show_end: int = 2) -> str:
    """
    Hide the middle of a value, keeping a few characters at each end.

    Examples:
        'localhost' -> 'lo*****st'
        'qbit' -> 'q**t'
        'abc' -> 'a*c'
    """
    if not value:
        return 'None'

    text = str(value)
    length = len(text)
    if length <= 2:
        return '*' * length

    # Always hide at least two characters (one for three-character values)
    hidden = max(length - show_start - show_end, min(2, length - 2))
    visible = length - hidden
    start = min(show_start, max(1, visible - 1))
    end = visible - start
    return text[:start] + '*' * hidden + (text[-end:] if end else '')


def mask_ip_address(host: Optional[str]) -> str:
    """
    Mask a daemon host for logging.

    Examples:
        '192.168.1.100' -> '192.xxx.xxx.100'
        'qbittorrent.lan' -> 'qb**********lan'
    """
    if not host:
        return 'None'

    match = _IPV4_PATTERN.match(str(host))
    if match:
        return f"{match.group(1)}.xxx.xxx.{match.group(4)}"

    return mask_partial(str(host), show_start=2, show_end=3)
