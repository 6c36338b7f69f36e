from enum import Enum

ROOT_TAG = "YAMAHA_AV"
MAIN_ZONE = "Main_Zone"
POWER_NODE = "Power"
ZONE_PLACEHOLDER = "$ZONE$"

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'
CTRL_URL = "http://{host}/YamahaRemoteControl/ctrl"

DEFAULT_ZONE_B_NAME = "Zone_B"
DEFAULT_TIMEOUT = 10.0

# Firmware only accepts absolute volume levels in 1 dB steps.
VOLUME_STEP = 10


class Command(str, Enum):
    GET = "GET"
    PUT = "PUT"


class Action(str, Enum):
    POWER = "POWER"
    VOLUME_GET = "VOLUME_GET"
    VOLUME_SET_VALUE = "VOLUME_SET_VALUE"
    VOLUME_SET_UP_DOWN = "VOLUME_SET_UP_DOWN"
    MUTE = "MUTE"


class ActionValue(str, Enum):
    ON = "On"
    OFF = "Off"
    STANDBY = "Standby"
    UP = "Up"
    DOWN = "Down"
    GET = "GetParam"
