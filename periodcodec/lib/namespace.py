#!/usr/bin/env python
from typing import Dict
from typing import Optional

## RFC 6321, section 3.1
nsmap: Dict[str, str] = {
    "X": "urn:ietf:params:xml:ns:icalendar-2.0",
}


def ns(prefix: str, tag: Optional[str] = None) -> str:
    name = "{%s}" % nsmap[prefix]
    if tag is not None:
        name = "%s%s" % (name, tag)
    return name
