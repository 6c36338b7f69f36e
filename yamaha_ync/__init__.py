"""Control Yamaha AV receivers through their YNC XML endpoint."""
from .const import Action, ActionValue, Command
from .exceptions import (ConfigurationError, MalformedResponseError,
                         MissingNodeError, ResponseException, TransportError,
                         YNCException)
from .protocol import ParserOptions, build_request, extract_value, parse_response
from .rxv import RXV
from .schema import ACTION_SCHEMAS, ZoneContext, resolve_segment

__all__ = [
    "ACTION_SCHEMAS",
    "Action",
    "ActionValue",
    "Command",
    "ConfigurationError",
    "MalformedResponseError",
    "MissingNodeError",
    "ParserOptions",
    "RXV",
    "ResponseException",
    "TransportError",
    "YNCException",
    "ZoneContext",
    "build_request",
    "extract_value",
    "parse_response",
    "resolve_segment",
]
