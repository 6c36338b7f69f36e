"""Media players for the main zone and zone B of a Yamaha receiver."""
from __future__ import annotations

from homeassistant.components.media_player import (
    MediaPlayerEntity,
    MediaPlayerEntityFeature,
    MediaPlayerState,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONF_HOST, CONF_NAME
from homeassistant.core import HomeAssistant
from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import DOMAIN
from .coordinator import YamahaZoneCoordinator

SUPPORTS = (
    MediaPlayerEntityFeature.VOLUME_SET
    | MediaPlayerEntityFeature.VOLUME_STEP
    | MediaPlayerEntityFeature.VOLUME_MUTE
    | MediaPlayerEntityFeature.TURN_ON
    | MediaPlayerEntityFeature.TURN_OFF
)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    async_add_entities(
        YamahaZoneDevice(coordinator, entry)
        for coordinator in entry.runtime_data.coordinators
    )


class YamahaZoneDevice(CoordinatorEntity[YamahaZoneCoordinator], MediaPlayerEntity):
    """Representation of one zone of a Yamaha receiver."""

    _attr_supported_features = SUPPORTS

    def __init__(self, coordinator: YamahaZoneCoordinator, entry: ConfigEntry):
        super().__init__(coordinator)
        host = entry.data[CONF_HOST]
        name = entry.data[CONF_NAME]
        if coordinator.is_zone_b:
            self._attr_unique_id = f"yamaha-{host}-zone-b"
            self._attr_name = f"{name} Zone B"
        else:
            self._attr_unique_id = f"yamaha-{host}"
            self._attr_name = name
        self._attr_device_info = DeviceInfo(
            identifiers={(DOMAIN, entry.entry_id)},
            name=name,
            manufacturer="Yamaha",
        )

    @property
    def state(self):
        """Return the state of the device."""
        if self.coordinator.data is None:
            return None
        return MediaPlayerState.ON if self.coordinator.data.is_on else MediaPlayerState.OFF

    @property
    def volume_level(self):
        """Volume level of the media player (0..1)."""
        if self.coordinator.data is None:
            return None
        return self.coordinator.data.volume

    @property
    def is_volume_muted(self):
        """Boolean if volume is currently muted."""
        if self.coordinator.data is None:
            return None
        return self.coordinator.data.muted

    async def async_turn_on(self):
        await self.coordinator.async_turn_on()
        await self.coordinator.async_request_refresh()

    async def async_turn_off(self):
        await self.coordinator.async_turn_off()
        await self.coordinator.async_request_refresh()

    async def async_mute_volume(self, mute):
        await self.coordinator.async_mute_volume(mute)
        await self.coordinator.async_request_refresh()

    async def async_set_volume_level(self, volume):
        await self.coordinator.async_set_volume(volume)
        await self.coordinator.async_request_refresh()

    async def async_volume_up(self):
        await self.coordinator.async_volume_up()
        await self.coordinator.async_request_refresh()

    async def async_volume_down(self):
        await self.coordinator.async_volume_down()
        await self.coordinator.async_request_refresh()
