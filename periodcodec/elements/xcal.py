#!/usr/bin/env python
from typing import ClassVar
from typing import Sequence
from typing import Union

from lxml import etree
from lxml.etree import _Element

from .base import BaseElement
from .base import ValuedBaseElement
from periodcodec.lib.namespace import nsmap
from periodcodec.lib.namespace import ns


# Properties
class FreeBusy(BaseElement):
    tag: ClassVar[str] = ns("X", "freebusy")


class Parameters(BaseElement):
    tag: ClassVar[str] = ns("X", "parameters")


class Parameter(BaseElement):
    """
    A property parameter, <fbtype><text>BUSY</text></fbtype>.  The
    element name is the lower-cased parameter name.  A multi-valued
    parameter gets one <text> child per value.
    """

    def __init__(self, name: str, value: Union[str, Sequence[str]]) -> None:
        super(Parameter, self).__init__()
        self.name = name.lower()
        if isinstance(value, str):
            value = [value]
        for x in value:
            self.append(Text(x))

    def xmlelement(self) -> _Element:
        root = etree.Element(ns("X", self.name), nsmap=nsmap)
        self.xmlchildren(root)
        return root


# Values
class Period(BaseElement):
    tag: ClassVar[str] = ns("X", "period")


class Start(ValuedBaseElement):
    tag: ClassVar[str] = ns("X", "start")


class End(ValuedBaseElement):
    tag: ClassVar[str] = ns("X", "end")


class Duration(ValuedBaseElement):
    tag: ClassVar[str] = ns("X", "duration")


class Text(ValuedBaseElement):
    tag: ClassVar[str] = ns("X", "text")
