"""Tests for the Home Assistant coordinator and config flow helpers."""

import math
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

pytest.importorskip("homeassistant")

from homeassistant.const import CONF_HOST  # noqa: E402
from homeassistant.helpers.update_coordinator import UpdateFailed  # noqa: E402

import custom_components.yamaha_ync as component  # noqa: E402
from custom_components.yamaha_ync.config_flow import is_valid_zone_name  # noqa: E402
from custom_components.yamaha_ync.const import CONF_ZONE_B_NAME  # noqa: E402
from custom_components.yamaha_ync.coordinator import (  # noqa: E402
    YamahaZoneCoordinator,
    YamahaZoneData,
    device_to_level,
    level_to_device,
    min_max,
)


class TestMinMax:
    def test_inside(self):
        assert min_max(0.4) == 0.4

    def test_clamped(self):
        assert min_max(-2) == 0
        assert min_max(7) == 1


class TestDeviceToLevel:
    def test_bounds(self):
        assert device_to_level(-800, -800, 150) == 0
        assert device_to_level(150, -800, 150) == 1

    def test_midpoint(self):
        assert device_to_level(-325, -800, 150) == pytest.approx(0.5)

    def test_outside_range_clamped(self):
        assert device_to_level(-900, -800, 150) == 0
        assert device_to_level(165, -800, 150) == 1


class TestLevelToDevice:
    def test_bounds(self):
        assert level_to_device(0, -800, 150) == -800
        assert level_to_device(1, -800, 150) == 150

    def test_rounded_to_whole_db(self):
        # -800 + 950 * 0.5 = -325, half way rounds up
        assert level_to_device(0.5, -800, 150) == -320
        assert level_to_device(0.52, -800, 150) == -310

    def test_level_clamped(self):
        assert level_to_device(1.5, -800, 150) == 150


class FakeRXV:
    host = "192.168.1.20"

    def __init__(self, is_on=True, muted=False, volume=-325):
        self._is_on = is_on
        self._muted = muted
        self._volume = volume
        self.volume_sets = []

    async def async_is_on(self, is_zone_b=False):
        return self._is_on

    async def async_is_mute(self, is_zone_b=False):
        return self._muted

    async def async_get_volume(self, is_zone_b=False):
        return self._volume

    async def async_set_volume(self, value, is_zone_b=False):
        self.volume_sets.append((value, is_zone_b))


def make_coordinator(rxv, is_zone_b=False):
    # Skips DataUpdateCoordinator.__init__, which needs a running hass.
    coordinator = YamahaZoneCoordinator.__new__(YamahaZoneCoordinator)
    coordinator._rxv = rxv
    coordinator.is_zone_b = is_zone_b
    coordinator.min_volume = -800
    coordinator.max_volume = 150
    return coordinator


class TestUpdateData:
    @pytest.mark.asyncio
    async def test_power_unknown_fails_update(self):
        coordinator = make_coordinator(FakeRXV(is_on=None))
        with pytest.raises(UpdateFailed):
            await coordinator._async_update_data()

    @pytest.mark.asyncio
    async def test_state_with_volume_as_level(self):
        coordinator = make_coordinator(FakeRXV(is_on=True, muted=True, volume=-325))
        data = await coordinator._async_update_data()
        assert data == YamahaZoneData(is_on=True, muted=True, volume=pytest.approx(0.5))

    @pytest.mark.asyncio
    async def test_unknown_volume_and_mute(self):
        coordinator = make_coordinator(FakeRXV(is_on=False, muted=None, volume=None))
        data = await coordinator._async_update_data()
        assert data == YamahaZoneData(is_on=False, muted=False, volume=None)


class TestSetVolume:
    @pytest.mark.asyncio
    async def test_level_sent_in_device_units(self):
        rxv = FakeRXV()
        coordinator = make_coordinator(rxv, is_zone_b=True)
        await coordinator.async_set_volume(0.5)
        assert rxv.volume_sets == [(-320, True)]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("level", [math.nan, math.inf])
    async def test_non_finite_level_ignored(self, level, caplog):
        rxv = FakeRXV()
        coordinator = make_coordinator(rxv)
        await coordinator.async_set_volume(level)
        assert rxv.volume_sets == []
        assert "Ignoring volume level" in caplog.text


class TestZoneName:
    @pytest.mark.parametrize("name", ["Zone_B", "ZONE_B", "_zone-2", "Zone.B"])
    def test_valid(self, name):
        assert is_valid_zone_name(name)

    @pytest.mark.parametrize("name", ["Zone B", "2Zone", "", "Zone<B>"])
    def test_invalid(self, name):
        assert not is_valid_zone_name(name)


class TestSetupEntry:
    @pytest.mark.asyncio
    async def test_zone_b_refresh_does_not_block_setup(self):
        hass = MagicMock()
        hass.config_entries.async_forward_entry_setups = AsyncMock()
        entry = MagicMock()
        entry.data = {CONF_HOST: "192.168.1.20", CONF_ZONE_B_NAME: "Zone_B"}

        main, zone_b = MagicMock(), MagicMock()
        for coordinator in (main, zone_b):
            coordinator.async_config_entry_first_refresh = AsyncMock()
            coordinator.async_refresh = AsyncMock()

        with patch.object(component, "async_get_clientsession"), patch.object(
            component, "YamahaZoneCoordinator", side_effect=[main, zone_b]
        ):
            assert await component.async_setup_entry(hass, entry) is True

        main.async_config_entry_first_refresh.assert_awaited_once()
        zone_b.async_config_entry_first_refresh.assert_not_awaited()
        zone_b.async_refresh.assert_awaited_once()
        assert entry.runtime_data.coordinators == [main, zone_b]
        hass.config_entries.async_forward_entry_setups.assert_awaited_once()
