"""XML codec for the platform's flat ``<xml>`` documents."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any
from xml.etree import ElementTree

__all__ = ["ParseError", "build", "cdata", "parse"]

ParseError = ElementTree.ParseError


def parse(xml: str | bytes) -> dict[str, Any]:
    """Parse an element-per-field document into a dict.

    Children of the root element become keys.  Leaf elements map to their
    text (CDATA sections are unwrapped), nested elements map to dicts and
    repeated siblings are collected into a list.

    Raises:
        ParseError: If *xml* is not well-formed.
    """
    root = ElementTree.fromstring(xml)
    return _normalize(root)


def _normalize(element: ElementTree.Element) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for child in element:
        value: Any = _normalize(child) if len(child) else (child.text or "")
        if child.tag not in result:
            result[child.tag] = value
        elif isinstance(result[child.tag], list):
            result[child.tag].append(value)
        else:
            result[child.tag] = [result[child.tag], value]
    return result


def build(data: Mapping[str, Any], root: str = "xml", item: str = "item") -> str:
    """Render *data* as a platform XML document.

    Strings are wrapped in CDATA, numbers are written bare, mappings nest
    and sequences emit one ``<item>`` element per entry.
    """
    return f"<{root}>{_render(data, item)}</{root}>"


def cdata(value: str) -> str:
    # "]]>" cannot appear inside a CDATA section; split it across two.
    return "<![CDATA[" + value.replace("]]>", "]]]]><![CDATA[>") + "]]>"


def _render(data: Any, item: str) -> str:
    if isinstance(data, Mapping):
        return "".join(f"<{key}>{_render(value, item)}</{key}>" for key, value in data.items())
    if isinstance(data, Sequence) and not isinstance(data, str | bytes):
        return "".join(f"<{item}>{_render(value, item)}</{item}>" for value in data)
    if data is None:
        return ""
    if isinstance(data, bool):
        return str(int(data))
    if isinstance(data, int | float):
        return str(data)
    return cdata(str(data))
