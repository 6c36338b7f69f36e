from dataclasses import dataclass

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONF_HOST, Platform
from homeassistant.core import HomeAssistant
from homeassistant.helpers.aiohttp_client import async_get_clientsession

from yamaha_ync import RXV

from .const import CONF_ZONE_B_NAME
from .coordinator import YamahaZoneCoordinator

PLATFORMS = [Platform.MEDIA_PLAYER]


@dataclass
class YamahaRuntimeData:
    rxv: RXV
    coordinators: list[YamahaZoneCoordinator]


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    rxv = RXV(
        entry.data[CONF_HOST],
        zone_b_name=entry.data.get(CONF_ZONE_B_NAME),
        session=async_get_clientsession(hass),
    )
    coordinators = [
        YamahaZoneCoordinator(hass, entry, rxv, is_zone_b=False),
        YamahaZoneCoordinator(hass, entry, rxv, is_zone_b=True),
    ]
    # Only the main zone decides whether the receiver is there. Zone B may be
    # unset on the receiver and then just stays unavailable.
    await coordinators[0].async_config_entry_first_refresh()
    await coordinators[1].async_refresh()

    entry.runtime_data = YamahaRuntimeData(rxv=rxv, coordinators=coordinators)
    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    return await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
