import pytest

from yamaha_ync.schema import ZoneContext


@pytest.fixture
def main_zone():
    return ZoneContext(is_zone_b=False, zone_b_name="Zone_B")


@pytest.fixture
def zone_b():
    return ZoneContext(is_zone_b=True, zone_b_name="Zone_B")
