#!/usr/bin/env python
import sys
from collections.abc import Iterable
from typing import ClassVar
from typing import List
from typing import Optional
from typing import Union

from lxml import etree
from lxml.etree import _Element

from periodcodec.lib.namespace import nsmap
from periodcodec.lib.python_utilities import to_unicode

if sys.version_info < (3, 11):
    from typing_extensions import Self
else:
    from typing import Self


class BaseElement:
    children: Optional[List[Self]] = None
    tag: ClassVar[Optional[str]] = None
    value: Optional[str] = None

    def __init__(self, value: Union[str, bytes, None] = None) -> None:
        self.children = []
        value = to_unicode(value)
        self.value = None
        if value is not None:
            self.value = value

    def __add__(
        self, other: Union["BaseElement", Iterable["BaseElement"]]
    ) -> "BaseElement":
        return self.append(other)

    def __str__(self) -> str:
        utf8 = etree.tostring(
            self.xmlelement(), encoding="utf-8", xml_declaration=True, pretty_print=True
        )
        return str(utf8, "utf-8")

    def __repr__(self) -> str:
        return "%s(%r)" % (self.__class__.__name__, self.value)

    def xmlelement(self) -> _Element:
        if self.tag is None:
            raise ValueError("Unexpected value None for self.tag")

        root = etree.Element(self.tag, nsmap=nsmap)
        if self.value is not None:
            root.text = self.value

        self.xmlchildren(root)
        return root

    def xmlchildren(self, root: _Element) -> None:
        if self.children is None:
            raise ValueError("Unexpected value None for self.children")

        for c in self.children:
            root.append(c.xmlelement())

    def append(self, element: Union[Self, Iterable[Self]]) -> Self:
        if self.children is None:
            raise ValueError("Unexpected value None for self.children")

        if isinstance(element, Iterable):
            self.children.extend(element)
        else:
            self.children.append(element)

        return self


class ValuedBaseElement(BaseElement):
    def __init__(self, value: Union[str, bytes, None] = None) -> None:
        super(ValuedBaseElement, self).__init__(value=value)
