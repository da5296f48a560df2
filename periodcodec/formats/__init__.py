"""
Wire formats for period lists.

Each format is a small adapter object with a write() and a read()
method, see base.PeriodFormat:

- TEXT: plain text iCalendar, RFC 5545
- XCAL: XML, RFC 6321
- JCAL: JSON, RFC 7265
"""

from typing import Dict

from .base import PeriodFormat
from .jcal import JCAL
from .jcal import JCalFormat
from .text import TEXT
from .text import TextFormat
from .xcal import XCAL
from .xcal import XCalFormat

FORMATS: Dict[str, PeriodFormat] = {
    TEXT.name: TEXT,
    XCAL.name: XCAL,
    JCAL.name: JCAL,
}

__all__ = [
    "FORMATS",
    "JCAL",
    "JCalFormat",
    "PeriodFormat",
    "TEXT",
    "TextFormat",
    "XCAL",
    "XCalFormat",
]
