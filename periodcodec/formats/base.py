from __future__ import annotations

from typing import Any
from typing import Protocol
from typing import runtime_checkable

from periodcodec.diagnostics import Diagnostics
from periodcodec.marshaller import TimezoneArg
from periodcodec.values.period import Period


@runtime_checkable
class PeriodFormat(Protocol):
    """
    What every wire format offers: write a list of periods into the
    format's value shape, and read one back.
    """

    name: str

    def write(self, periods: list[Period]) -> Any:
        ...

    def read(
        self,
        raw: Any,
        timezone: TimezoneArg = None,
        diagnostics: Diagnostics | None = None,
    ) -> list[Period]:
        ...
