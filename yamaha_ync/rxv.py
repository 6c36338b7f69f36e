from __future__ import annotations

import asyncio
import logging

import aiohttp

from .const import (CTRL_URL, DEFAULT_TIMEOUT, DEFAULT_ZONE_B_NAME, Action,
                    ActionValue, Command)
from .exceptions import MalformedResponseError, TransportError, YNCException
from .protocol import (DEFAULT_PARSER_OPTIONS, ParserOptions, build_request,
                       extract_value, parse_response)
from .schema import ZoneContext

_LOGGER = logging.getLogger(__name__)


class RXV(object):
    """Client for the receiver's XML control endpoint.

    Every call is one request/response cycle. Failures are logged and
    turned into ``None`` so a device hiccup never reaches the caller as an
    exception.
    """

    def __init__(self, host: str,
                 zone_b_name: str | None = None,
                 session: aiohttp.ClientSession | None = None,
                 timeout=DEFAULT_TIMEOUT,
                 parser_options: ParserOptions = DEFAULT_PARSER_OPTIONS,
                 logger: logging.Logger | None = None):
        self.host = host
        self.ctrl_url = CTRL_URL.format(host=host)
        self.zone_b_name = zone_b_name or DEFAULT_ZONE_B_NAME
        self._session = session
        self._http_timeout = aiohttp.ClientTimeout(total=timeout)
        self._parser_options = parser_options
        self._logger = logger or _LOGGER

    def _zone_context(self, is_zone_b):
        return ZoneContext(is_zone_b=bool(is_zone_b), zone_b_name=self.zone_b_name)

    async def _async_post(self, request_text: str) -> str:
        if self._session is not None:
            return await self._async_post_with(self._session, request_text)

        async with aiohttp.ClientSession() as session:
            return await self._async_post_with(session, request_text)

    async def _async_post_with(self, session, request_text):
        try:
            async with session.post(
                self.ctrl_url,
                data=request_text,
                headers={"Content-Type": "text/xml"},
                timeout=self._http_timeout,
            ) as res:
                if not 200 <= res.status < 300:
                    raise TransportError(
                        f"{self.ctrl_url} answered with HTTP {res.status}"
                    )
                try:
                    return await res.text()
                except UnicodeDecodeError as err:
                    raise MalformedResponseError(
                        f"undecodable body from {self.ctrl_url}: {err}"
                    ) from err
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            raise TransportError(
                f"error talking to {self.ctrl_url}: {err!r}"
            ) from err

    async def _async_request(self, command, action, value, is_zone_b):
        ctx = self._zone_context(is_zone_b)
        request_text = build_request(command, action, value, ctx)
        self._logger.debug("Sending: %s", request_text)

        try:
            response_text = await self._async_post(request_text)
            self._logger.debug("Received: %s", response_text)
            data = parse_response(response_text, self._parser_options)
            return extract_value(data, action, ctx)
        except YNCException as err:
            self._logger.error("%s %s failed (zone b: %s): %s",
                               command.value, action.value, ctx.is_zone_b, err)
            return None

    async def async_set_action(self, action: Action, value, is_zone_b=False):
        """Send a PUT for ``action`` and return the value the receiver echoes."""
        self._logger.debug("Set action %s, value: %s, zone b: %s",
                           action, value, is_zone_b)
        return await self._async_request(Command.PUT, action, value, is_zone_b)

    async def async_get_action(self, action: Action, is_zone_b=False):
        """Query ``action`` and return the receiver's current value."""
        self._logger.debug("Get action %s, zone b: %s", action, is_zone_b)
        return await self._async_request(Command.GET, action, ActionValue.GET,
                                         is_zone_b)

    async def async_is_on(self, is_zone_b=False):
        power = await self.async_get_action(Action.POWER, is_zone_b)
        if power is None:
            return None
        return power == ActionValue.ON.value

    async def async_turn_on_off(self, state, is_zone_b=False):
        new_state = ActionValue.ON if state else ActionValue.STANDBY
        return await self.async_set_action(Action.POWER, new_state, is_zone_b)

    async def async_turn_on(self, is_zone_b=False):
        return await self.async_turn_on_off(True, is_zone_b)

    async def async_turn_off(self, is_zone_b=False):
        return await self.async_turn_on_off(False, is_zone_b)

    async def async_is_mute(self, is_zone_b=False):
        mute = await self.async_get_action(Action.MUTE, is_zone_b)
        if mute is None:
            return None
        return mute == ActionValue.ON.value

    async def async_set_mute(self, mute, is_zone_b=False):
        new_state = ActionValue.ON if mute else ActionValue.OFF
        return await self.async_set_action(Action.MUTE, new_state, is_zone_b)

    async def async_get_volume(self, is_zone_b=False):
        """Current volume in device units (tenths of a dB, e.g. -455)."""
        level = await self.async_get_action(Action.VOLUME_GET, is_zone_b)
        if isinstance(level, dict):
            # Most firmware nests the level as <Val>/<Exp>/<Unit>.
            level = level.get("Val")
        try:
            return int(level)
        except (TypeError, ValueError):
            if level is not None:
                self._logger.error("Unexpected volume level: %s", level)
            return None

    async def async_set_volume(self, value, is_zone_b=False):
        """Set an absolute volume in device units, rounded to whole dB."""
        return await self.async_set_action(Action.VOLUME_SET_VALUE, value, is_zone_b)

    async def async_volume_up(self, is_zone_b=False):
        return await self.async_set_action(
            Action.VOLUME_SET_UP_DOWN, ActionValue.UP, is_zone_b
        )

    async def async_volume_down(self, is_zone_b=False):
        return await self.async_set_action(
            Action.VOLUME_SET_UP_DOWN, ActionValue.DOWN, is_zone_b
        )
