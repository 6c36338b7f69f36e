from __future__ import annotations
import logging
import voluptuous as vol
from homeassistant import config_entries
from homeassistant.const import CONF_NAME, CONF_HOST
from homeassistant.helpers.aiohttp_client import async_get_clientsession

from yamaha_ync import RXV, Action
from yamaha_ync.const import DEFAULT_ZONE_B_NAME

from .const import (CONF_MAX_VOLUME, CONF_MIN_VOLUME, CONF_ZONE_B_NAME,
                    DEFAULT_MAX_VOLUME, DEFAULT_MIN_VOLUME, DEFAULT_NAME,
                    DOMAIN)

_LOGGER = logging.getLogger(__name__)

# The zone name becomes an element tag, so it must be a valid XML name.
ZONE_B_NAME_SCHEMA = vol.Match(r"^[A-Za-z_][\w.-]*$")


def is_valid_zone_name(name):
    try:
        ZONE_B_NAME_SCHEMA(name)
    except vol.Invalid:
        return False
    return True


class YamahaFlowHandler(config_entries.ConfigFlow, domain=DOMAIN):
    """Config flow for a Yamaha receiver."""

    VERSION = 1

    async def async_step_user(self, user_input=None):
        """Handle a flow initialized by the user."""
        errors = {}

        if user_input is not None:
            await self.async_set_unique_id(
                f"yamaha-{user_input[CONF_HOST]}"
            )
            self._abort_if_unique_id_configured()

            if not is_valid_zone_name(user_input[CONF_ZONE_B_NAME]):
                errors[CONF_ZONE_B_NAME] = "invalid_zone_name"
            elif user_input[CONF_MIN_VOLUME] >= user_input[CONF_MAX_VOLUME]:
                errors["base"] = "invalid_volume_range"
            else:
                rxv = RXV(
                    user_input[CONF_HOST],
                    zone_b_name=user_input[CONF_ZONE_B_NAME],
                    session=async_get_clientsession(self.hass),
                )
                # Any answer to a power query means the receiver is there.
                if await rxv.async_get_action(Action.POWER) is None:
                    _LOGGER.error("Couldn't find receiver at %s", user_input[CONF_HOST])
                    errors["base"] = "cannot_connect"
                else:
                    return self.async_create_entry(
                        title=user_input[CONF_NAME], data=user_input
                    )

        return self.async_show_form(
            step_id="user",
            data_schema=vol.Schema(
                    {
                        vol.Required(CONF_NAME, default=DEFAULT_NAME): str,
                        vol.Required(CONF_HOST): str,
                        vol.Required(CONF_ZONE_B_NAME, default=DEFAULT_ZONE_B_NAME): str,
                        vol.Required(CONF_MIN_VOLUME, default=DEFAULT_MIN_VOLUME): vol.Coerce(int),
                        vol.Required(CONF_MAX_VOLUME, default=DEFAULT_MAX_VOLUME): vol.Coerce(int),
                    }
            ),
            errors=errors,
        )
