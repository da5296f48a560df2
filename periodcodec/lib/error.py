#!/usr/bin/env python
import logging
import os
from typing import Iterable
from typing import Optional
from typing import Tuple

from periodcodec import __version__

try:
    ## one of DEBUG_PDB, DEBUG, DEVELOPMENT, PRODUCTION
    debugmode = os.environ["PYTHON_PERIODCODEC_DEBUGMODE"]
except KeyError:
    if "dev" in __version__ or __version__ == "(unknown)":
        debugmode = "DEVELOPMENT"
    else:
        debugmode = "PRODUCTION"

log = logging.getLogger("periodcodec")
if debugmode.startswith("DEBUG"):
    log.setLevel(logging.DEBUG)
else:
    log.setLevel(logging.WARNING)


def weirdness(*reasons):
    from periodcodec.lib.debug import xmlstring

    reason = " : ".join([xmlstring(x) for x in reasons])
    log.warning(f"Deviation from expectations found: {reason}")
    if debugmode == "DEBUG_PDB":
        log.error(f"Dropping into debugger due to {reason}")
        import pdb

        pdb.set_trace()


def assert_(condition: object) -> None:
    try:
        assert condition
    except AssertionError:
        if debugmode == "PRODUCTION":
            log.error(
                "Deviation from expectations found.  %s" % ERR_FRAGMENT, exc_info=True
            )
        elif debugmode == "DEBUG_PDB":
            log.error("Deviation from expectations found.  Dropping into debugger")
            import pdb

            pdb.set_trace()
        else:
            raise


ERR_FRAGMENT: str = "Please consider raising an issue on the periodcodec issue tracker, include this error, the traceback (if any) and the calendar data that triggered it"


class CodecError(Exception):
    value: Optional[str] = None
    reason: str = "no reason"

    def __init__(
        self, value: Optional[str] = None, reason: Optional[str] = None
    ) -> None:
        if value is not None:
            self.value = value
        if reason:
            self.reason = reason
        super().__init__(value, self.reason)

    def __str__(self) -> str:
        return "%s for '%s', reason %s" % (
            self.__class__.__name__,
            self.value,
            self.reason,
        )


class InvalidDateTime(CodecError, ValueError):
    """
    The text is neither a compact (basic) nor an extended ISO 8601
    date-time, or one of its fields is out of range.
    """

    reason = "not a date-time value"


class InvalidDuration(CodecError, ValueError):
    """
    The text does not match the RFC 5545 duration grammar.
    """

    reason = "not a duration value"


class MissingXmlElements(CodecError):
    """
    An xCal property element lacks every child element that could carry
    its value.  Nothing can be salvaged, so this is raised to the caller
    instead of being recorded as a diagnostic.
    """

    elements: Tuple[str, ...] = ()
    reason = "missing required XML elements"

    def __init__(self, elements: Iterable[str] = (), value: Optional[str] = None) -> None:
        self.elements = tuple(elements)
        super().__init__(
            value=value,
            reason="property has no <%s> element" % "> or <".join(self.elements)
            if self.elements
            else None,
        )
