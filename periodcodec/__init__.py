#!/usr/bin/env python
import logging

__version__ = "0.1.0.dev0"

from .diagnostics import Diagnostic
from .diagnostics import DiagnosticCode
from .diagnostics import Diagnostics
from .property import FreeBusyMarshaller
from .property import FreeBusy
from .values.durations import Duration
from .values.period import Period

## Silence notification of no default logging handler
log = logging.getLogger("periodcodec")


class NullHandler(logging.Handler):
    def emit(self, record) -> None:
        pass


log.addHandler(NullHandler())

__all__ = [
    "__version__",
    "Diagnostic",
    "DiagnosticCode",
    "Diagnostics",
    "Duration",
    "FreeBusy",
    "FreeBusyMarshaller",
    "Period",
]
