from __future__ import annotations

from dataclasses import dataclass
from math import floor, isfinite
from numbers import Real
import xml.etree.ElementTree as ElementTree

from defusedxml import DefusedXmlException
from defusedxml import ElementTree as DefusedElementTree

from .const import (MAIN_ZONE, ROOT_TAG, VOLUME_STEP, XML_DECLARATION,
                    Action, ActionValue, Command)
from .exceptions import (ConfigurationError, MalformedResponseError,
                         MissingNodeError, ResponseException)
from .schema import WalkMode, ZoneContext, walk_path


@dataclass(frozen=True)
class ParserOptions:
    """How a response document is turned into nested dicts.

    ``ignore_attrs`` drops element attributes, otherwise they are kept
    under the ``"$"`` key. ``explicit_array`` wraps every child in a list
    even when it occurs once.
    """
    ignore_attrs: bool = True
    explicit_array: bool = False


DEFAULT_PARSER_OPTIONS = ParserOptions()


def encode_value(action: Action, value) -> str:
    """Convert a caller value into the text the receiver expects."""
    if isinstance(value, ActionValue):
        return value.value
    if isinstance(value, str):
        if action is not Action.VOLUME_SET_VALUE:
            return value
        # Numeric text still has to go through the step rounding below.
        try:
            value = float(value)
        except ValueError:
            raise ConfigurationError(action, value) from None
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ConfigurationError(action, value)
    if action is not Action.VOLUME_SET_VALUE or not isfinite(value):
        raise ConfigurationError(action, value)

    # Round half up to the nearest step, -301 goes out as -300.
    return str(int(floor(value / VOLUME_STEP + 0.5)) * VOLUME_STEP)


def _append_children(element, children):
    for name, content in children.items():
        child = ElementTree.SubElement(element, name)
        if isinstance(content, dict):
            _append_children(child, content)
        else:
            child.text = str(content)


def build_request(command: Command, action: Action, value, ctx: ZoneContext) -> str:
    """Build the command document for ``action`` carrying ``value``."""
    data = {MAIN_ZONE: {}}

    parent, name = walk_path(action, ctx, data[MAIN_ZONE], WalkMode.BUILD)
    # The caller value wins over anything the schema placed on the
    # terminal node; its siblings keep their inline values.
    parent[name] = encode_value(action, value)

    root = ElementTree.Element(ROOT_TAG, cmd=Command(command).value)
    _append_children(root, data)
    body = ElementTree.tostring(root, encoding="unicode",
                                short_empty_elements=False)
    return XML_DECLARATION + body


def _element_to_data(element, options: ParserOptions):
    children = list(element)
    attrs = dict(element.attrib) if not options.ignore_attrs else {}

    if not children and not attrs:
        return (element.text or "").strip()

    data = {}
    if attrs:
        data["$"] = attrs
    for child in children:
        value = _element_to_data(child, options)
        if options.explicit_array:
            data.setdefault(child.tag, []).append(value)
        elif child.tag in data:
            # Repeated tags collapse into a list, single ones stay scalar.
            if not isinstance(data[child.tag], list):
                data[child.tag] = [data[child.tag]]
            data[child.tag].append(value)
        else:
            data[child.tag] = value

    if not children:
        text = (element.text or "").strip()
        if text:
            data["_"] = text
    return data


def parse_response(text: str, options: ParserOptions = DEFAULT_PARSER_OPTIONS) -> dict:
    """Parse a receiver response into nested dicts below the root element."""
    try:
        root = DefusedElementTree.fromstring(text)
    except (ElementTree.ParseError, DefusedXmlException) as err:
        raise MalformedResponseError(f"invalid XML returned: {err}") from err

    code = root.get("RC")
    if code is not None and code != "0":
        raise ResponseException(code)

    data = _element_to_data(root, options)
    if not isinstance(data, dict):
        # Bare root element without children.
        return {}
    return data


def extract_value(data: dict, action: Action, ctx: ZoneContext):
    """Return the terminal node of ``action`` in a parsed response."""
    zone = data.get(MAIN_ZONE)
    if isinstance(zone, list):
        zone = zone[0] if zone else None
    if zone is None:
        raise MissingNodeError(action, [MAIN_ZONE])

    parent, name = walk_path(action, ctx, zone, WalkMode.EXTRACT)
    value = parent[name]
    if isinstance(value, list):
        value = value[0]
    return value
