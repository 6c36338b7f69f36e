#!/usr/bin/env python


class YNCException(Exception):
    pass


class TransportError(YNCException):
    """Receiver could not be reached or answered with a non-2xx status."""


class MalformedResponseError(YNCException):
    """Receiver answered with a body that is not well formed XML."""


class ResponseException(YNCException):
    """Exception raised when yamaha receiver responded with an error code."""

    def __init__(self, code):
        super().__init__(f"receiver responded with RC={code}")
        self.code = code


class MissingNodeError(YNCException):
    """Response document lacks the node expected for an action."""

    def __init__(self, action, path):
        super().__init__(f"{action} response has no node at {'/'.join(path)}")
        self.action = action
        self.path = path


class ConfigurationError(YNCException):
    """Raised when an action is called with a value it cannot carry."""

    def __init__(self, action, value):
        super().__init__(f"{action} does not accept value {value!r}")
