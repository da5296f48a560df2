"""
Recoverable parse notices.

A Diagnostics object is created by the caller of a parse operation,
filled in place while the value is being read, and inspected afterwards.
It must not be shared between unrelated parses.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator
from typing import List
from typing import Optional

from periodcodec.lib.error import assert_

log = logging.getLogger(__name__)


class DiagnosticCode(IntEnum):
    """Numeric classification of a recoverable parse problem."""

    MISSING_START = 9
    INVALID_START = 10
    INVALID_END = 11
    INVALID_DURATION = 12
    MALFORMED_PERIOD = 13
    INVALID_PERIOD_END = 14
    UNKNOWN_TIMEZONE = 38


_MESSAGES = {
    DiagnosticCode.MISSING_START: "Period has no start date",
    DiagnosticCode.INVALID_START: "Could not parse period start date",
    DiagnosticCode.INVALID_END: "Could not parse period end date",
    DiagnosticCode.INVALID_DURATION: "Could not parse period duration",
    DiagnosticCode.MALFORMED_PERIOD: "Period is incomplete or malformed, skipping it",
    DiagnosticCode.INVALID_PERIOD_END: "Could not parse period end date or duration",
    DiagnosticCode.UNKNOWN_TIMEZONE: "Unknown timezone identifier, using local time instead",
}


@dataclass(frozen=True)
class Diagnostic:
    """
    One recorded parse anomaly.

    Attributes:
        code: numeric classification, normally a DiagnosticCode
        context: the offending text, if there is any
    """

    code: int
    context: Optional[str] = None

    @property
    def message(self) -> str:
        try:
            text = _MESSAGES[DiagnosticCode(self.code)]
        except ValueError:
            text = "Parse problem"
        if self.context is not None:
            return "%s: %s" % (text, self.context)
        return text

    def __str__(self) -> str:
        return "(%d) %s" % (self.code, self.message)


class Diagnostics:
    """Ordered, append-only collection of Diagnostic entries."""

    def __init__(self) -> None:
        self._entries: List[Diagnostic] = []

    def add(self, code: int, context: Optional[str] = None) -> Diagnostic:
        assert_(isinstance(code, int))
        entry = Diagnostic(code, context)
        log.debug("parse diagnostic %s", entry)
        self._entries.append(entry)
        return entry

    def codes(self) -> List[int]:
        return [x.code for x in self._entries]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> Diagnostic:
        return self._entries[index]

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return "Diagnostics(%r)" % self._entries
