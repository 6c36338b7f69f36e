from dataclasses import dataclass
from datetime import timedelta
from math import floor, isfinite
import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator, UpdateFailed

from yamaha_ync import RXV
from yamaha_ync.const import VOLUME_STEP

from .const import (CONF_MAX_VOLUME, CONF_MIN_VOLUME, DEFAULT_MAX_VOLUME,
                    DEFAULT_MIN_VOLUME, DOMAIN)

_LOGGER = logging.getLogger(__name__)


@dataclass
class YamahaZoneData:
    is_on: bool
    muted: bool
    volume: float | None


def min_max(value, min=0, max=1):
    if value < min:
        return min
    if value > max:
        return max
    return value


def device_to_level(value, min_volume, max_volume):
    """Map a device volume (e.g. -455) onto 0..1."""
    return min_max((value - min_volume) / (max_volume - min_volume), 0, 1)


def level_to_device(level, min_volume, max_volume):
    """Map 0..1 onto device units, in whole dB steps inside the range."""
    value = min_volume + (max_volume - min_volume) * min_max(level, 0, 1)
    return int(floor(value / VOLUME_STEP + 0.5)) * VOLUME_STEP


class YamahaZoneCoordinator(DataUpdateCoordinator[YamahaZoneData]):
    def __init__(self, hass, config_entry: ConfigEntry, rxv: RXV, is_zone_b=False):
        super().__init__(
            hass,
            _LOGGER,
            config_entry=config_entry,
            name=f"{DOMAIN}_{rxv.zone_b_name if is_zone_b else 'main'}",
            update_interval=timedelta(seconds=5),
        )
        self._rxv = rxv
        self.is_zone_b = is_zone_b
        self.min_volume = config_entry.data.get(CONF_MIN_VOLUME, DEFAULT_MIN_VOLUME)
        self.max_volume = config_entry.data.get(CONF_MAX_VOLUME, DEFAULT_MAX_VOLUME)

    async def _async_update_data(self):
        is_on = await self._rxv.async_is_on(self.is_zone_b)
        if is_on is None:
            raise UpdateFailed(f"receiver at {self._rxv.host} did not answer")

        muted = await self._rxv.async_is_mute(self.is_zone_b)
        volume = await self._rxv.async_get_volume(self.is_zone_b)

        return YamahaZoneData(
            is_on=is_on,
            muted=bool(muted),
            volume=(
                device_to_level(volume, self.min_volume, self.max_volume)
                if volume is not None else None
            ),
        )

    async def async_turn_on(self):
        await self._rxv.async_turn_on(self.is_zone_b)

    async def async_turn_off(self):
        await self._rxv.async_turn_off(self.is_zone_b)

    async def async_mute_volume(self, mute):
        await self._rxv.async_set_mute(bool(mute), self.is_zone_b)

    async def async_set_volume(self, volume: float):
        if not isfinite(volume):
            _LOGGER.error("Ignoring volume level %s for %s", volume, self._rxv.host)
            return
        receiver_vol = level_to_device(volume, self.min_volume, self.max_volume)
        await self._rxv.async_set_volume(receiver_vol, self.is_zone_b)

    async def async_volume_up(self):
        await self._rxv.async_volume_up(self.is_zone_b)

    async def async_volume_down(self):
        await self._rxv.async_volume_down(self.is_zone_b)
