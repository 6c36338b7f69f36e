DOMAIN = "yamaha_ync"

CONF_ZONE_B_NAME = "zone_b_name"
CONF_MIN_VOLUME = "min_volume"
CONF_MAX_VOLUME = "max_volume"

DEFAULT_NAME = "Yamaha Receiver"

# Device units, tenths of a dB.
DEFAULT_MIN_VOLUME = -800
DEFAULT_MAX_VOLUME = 150
